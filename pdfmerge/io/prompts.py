from pathlib import Path

from ..config import OUTPUT_EXTENSION, OUTPUT_NAME_PROMPT, OVERWRITE_PROMPT
from ..errors import EmptyInput, InvalidConfirmation


def validate_output_name(raw: str) -> Path:
    name = raw.strip()
    if not name:
        raise EmptyInput("Output file name cannot be empty. Please try again.")
    return Path(f"{name}{OUTPUT_EXTENSION}")


def parse_confirmation(raw: str) -> bool:
    answer = raw.strip().lower()
    if answer.startswith('y'):
        return True
    if answer.startswith('n'):
        return False
    raise InvalidConfirmation("Please answer with y (yes) or n (no).")


def confirm_overwrite(candidate: Path) -> bool:
    while True:
        try:
            return parse_confirmation(input(OVERWRITE_PROMPT.format(path=candidate)))
        except InvalidConfirmation as e:
            print(e)


def prompt_for_output_path() -> Path:
    """
    Ask for the merged file name until a usable one is given.

    The extension is appended here; an existing file is only reused after
    the user agrees to overwrite it.
    """
    while True:
        try:
            candidate = validate_output_name(input(OUTPUT_NAME_PROMPT))
        except EmptyInput as e:
            print(e)
            continue

        if not candidate.exists():
            return candidate
        if confirm_overwrite(candidate):
            return candidate
        print("Please enter a different file name.")
