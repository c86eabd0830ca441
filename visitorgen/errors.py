from __future__ import annotations

from dataclasses import dataclass

# ==================================================
# Generation Errors
# ==================================================


@dataclass(slots=True)
class GenerationErrorDetails:
    """
    Structured metadata attached to every generation error.
    """

    stage: str
    path: str | None
    original_message: str


class GenerationError(Exception):
    """
    Base error type. Raised only for environmental failures; incomplete
    declarations never raise.
    """

    def __init__(self, details: GenerationErrorDetails, original_exception: Exception | None = None) -> None:
        self.details = details
        self.original_exception = original_exception
        location = f" ({details.path})" if details.path else ""
        super().__init__(
            f"[{details.stage}] {self.__class__.__name__}{location}: {details.original_message}"
        )


class InputRootError(GenerationError):
    """
    The input root is missing, is not a directory or cannot be read.
    """


class OutputRootError(GenerationError):
    """
    The output directory cannot be created or a generated file cannot be written.
    """


class DeclarationParseError(GenerationError):
    pass


def input_root_error(path: str, message: str, exc: Exception | None = None) -> InputRootError:
    return InputRootError(
        GenerationErrorDetails(stage="discover", path=path, original_message=message),
        exc,
    )


def output_root_error(path: str, exc: Exception) -> OutputRootError:
    return OutputRootError(
        GenerationErrorDetails(stage="write", path=path, original_message=str(exc)),
        exc,
    )
