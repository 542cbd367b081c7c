"""Warning sinks: where rendered lint warnings go.

A sink is any callable taking a LintWarning. The engine hands every warning to the
sink as it is produced, so formatting stays out of the checks.
"""

import sys
from typing import Callable, Optional, TextIO

from model_linter.validators.models import LintWarning

# Type alias for warning consumers
WarningSink = Callable[[LintWarning], None]


def stderr_sink(warning: LintWarning) -> None:
    """Write the rendered warning line to standard error."""
    print(warning.render(), file=sys.stderr)


def stream_sink(stream: TextIO) -> WarningSink:
    """Create a sink that writes rendered warning lines to an arbitrary text stream."""

    def _write(warning: LintWarning) -> None:
        stream.write(warning.render() + "\n")

    return _write


class CollectingSink:
    """Keeps every warning it receives, e.g. for assertions or later rendering."""

    def __init__(self):
        self.warnings: list[LintWarning] = []

    def __call__(self, warning: LintWarning) -> None:
        self.warnings.append(warning)

    @property
    def lines(self) -> list[str]:
        return [w.render() for w in self.warnings]

    @property
    def last(self) -> Optional[LintWarning]:
        return self.warnings[-1] if self.warnings else None

    def clear(self) -> None:
        self.warnings.clear()
