"""Exceptions raised while reading and parsing controller reports"""

from typing import List, Optional


class ReportParseError(ValueError):
    """A report could not be turned into a data model"""

    def __init__(self, message: str, line_number: Optional[int] = None, line: str = ""):
        self.message = message
        self.line_number = line_number
        self.line = line
        super().__init__(message)

    def __str__(self) -> str:
        # line_number is filled in by the report parser once the line is known
        if self.line_number is not None:
            return f"line {self.line_number}: {self.message}"
        return self.message


class ReportStructureError(ReportParseError):
    """The indentation layout of a report does not describe a valid tree"""

    def __init__(self, message: str, line_number: Optional[int] = None, line: str = "",
                 depth: Optional[int] = None):
        self.depth = depth
        super().__init__(message, line_number, line)


class FieldFormatError(ReportParseError):
    """A line did not match the grammar expected for it"""

    def __init__(self, grammar: str, text: str, reason: str = "",
                 line_number: Optional[int] = None):
        self.grammar = grammar
        self.text = text
        self.reason = reason
        message = f"cannot parse {grammar} from {text!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message, line_number, text)


class SizeFormatError(FieldFormatError):
    """Size text is not of the form '<number> [KB|MB|GB|TB]'"""

    def __init__(self, text: str):
        super().__init__("size", text)


class CommandError(RuntimeError):
    """The external controller command failed to produce a report"""

    def __init__(self, cmd: List[str], returncode: Optional[int] = None, output: str = "",
                 reason: str = ""):
        self.cmd = list(cmd)
        self.returncode = returncode
        self.output = output
        message = f"command {' '.join(self.cmd)!r} failed"
        if returncode is not None:
            message = f"{message} with exit status {returncode}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
