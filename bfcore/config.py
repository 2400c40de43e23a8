from dataclasses import dataclass
import os

DEFAULT_TAPE_SIZE = 30000
OUTPUT_CHOICES = ("stdout", "stderr")


@dataclass
class InterpreterConfig:
    """Configuration parameters for a single run."""
    tape_size: int = DEFAULT_TAPE_SIZE
    output: str = "stdout"  # stream receiving OutputByte: "stdout" or "stderr"

    def __post_init__(self):
        if self.tape_size < 1:
            raise ValueError(f"tape_size must be at least 1, got {self.tape_size}")
        if self.output not in OUTPUT_CHOICES:
            raise ValueError(f"output must be one of {', '.join(OUTPUT_CHOICES)}, got {self.output!r}")

    @classmethod
    def from_env(cls, **overrides) -> 'InterpreterConfig':
        """Build a config from BF_TAPE_SIZE / BF_OUTPUT, with explicit overrides winning.

        Overrides that are None are ignored, so argparse defaults can be passed straight through.
        """
        raw_size = os.environ.get("BF_TAPE_SIZE", str(DEFAULT_TAPE_SIZE))
        try:
            tape_size = int(raw_size)
        except ValueError:
            raise ValueError(f"BF_TAPE_SIZE must be an integer, got {raw_size!r}") from None
        values = {
            "tape_size": tape_size,
            "output": os.environ.get("BF_OUTPUT", "stdout").strip().lower(),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
