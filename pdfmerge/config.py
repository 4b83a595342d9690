# Defaults for PDF discovery, prompting and merging
from typing import Tuple

# 1. Output file extension appended to the name the user types
OUTPUT_EXTENSION = ".pdf"

# 2. Discovery pattern (matched case-insensitively against direct children)
PDF_PATTERN = "*.pdf"

# 3. Merge executables, in order of preference
MERGE_TOOL_PRIORITY: Tuple[str, ...] = ("pdfunite", "pdftk")

# 4. Directory used when none is given on the command line
DEFAULT_TARGET_DIR = "."

# 5. Interactive prompts
OUTPUT_NAME_PROMPT = "Enter a name for the output merged PDF file (without extension): "
OVERWRITE_PROMPT = "File '{path}' already exists. Overwrite? (y/n): "

# 6. Diagnostic logging level (console messages are always printed)
LOG_LEVEL_ENV = "PDFMERGE_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

PROG_NAME = "pdf-merge"
DESCRIPTION = (
    "Merge all PDF files found in the specified directory (or the current directory\n"
    "if no directory is provided) into one merged PDF file."
)
EPILOG = "Dependencies: pdfunite (preferred) or pdftk must be installed."
