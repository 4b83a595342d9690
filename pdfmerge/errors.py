class PdfMergeError(RuntimeError):
    """Terminal failure; the message is shown to the user as-is."""


class InvalidDirectory(PdfMergeError):
    def __init__(self, path, reason: str = ""):
        self.path = path
        if reason:
            super().__init__(f"Error: Cannot read directory '{path}': {reason}.")
        else:
            super().__init__(f"Error: '{path}' is not a valid directory.")


class MissingDependency(PdfMergeError):
    def __init__(self, tools):
        self.tools = tuple(tools)
        names = " nor ".join(f"'{t}'" for t in self.tools)
        super().__init__(
            f"Error: Neither {names} is installed.\n"
            "Please install one of these tools and try again."
        )


class NoPdfFiles(PdfMergeError):
    def __init__(self, path):
        self.path = path
        super().__init__(f"Error: No PDF files found in directory '{path}'.")


class MergeToolFailure(PdfMergeError):
    def __init__(self, tool: str, returncode=None, reason: str = ""):
        self.tool = tool
        self.returncode = returncode
        if returncode is not None:
            detail = f"{tool} exited with status {returncode}"
        else:
            detail = f"could not run {tool}: {reason}"
        super().__init__(f"Error: Merging PDF files failed ({detail}).")


# Recoverable input errors, handled inside the prompt loop only

class EmptyInput(ValueError):
    pass


class InvalidConfirmation(ValueError):
    pass
