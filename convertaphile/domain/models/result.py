"""Conversion result domain model."""
from pydantic import BaseModel, ConfigDict

# Exit code reported when the process never exited normally (timeout or launch failure).
ABNORMAL_EXIT_CODE = -1


class ConversionResult(BaseModel):
    """Outcome of one external command execution."""

    success: bool
    exit_code: int
    stdout: str = ""
    stderr: str = ""

    model_config = ConfigDict(frozen=True)

    @classmethod
    def failure(cls, message: str, stdout: str = "") -> "ConversionResult":
        """Build a result for a process that never produced a normal exit."""
        return cls(success=False, exit_code=ABNORMAL_EXIT_CODE, stdout=stdout, stderr=message)
