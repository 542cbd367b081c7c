"""Base validator: abstract class implementing the Strategy Pattern.

Each validator is a standalone, independently testable unit.
New validators are added without modifying the engine.
"""

from abc import ABC, abstractmethod
from typing import Optional

from model_linter.models import LanguageModel
from model_linter.validators.models import LintWarning, ErrorCode

# Characters trimmed from phrases, values and synonyms: Unicode space separators,
# tab, line terminators and the byte order mark. \x1c-\x1f and \x85 are kept.
TRIM_WHITESPACE = (
    "\t\n\v\f\r \xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)


class BaseValidator(ABC):
    """Abstract base for all model validators.

    Contract:
        - validate() is deterministic: same input → same output
        - validate() returns a list of LintWarning in detection order (empty = no issues)
        - lookup maps are local to one validate() call; nothing is kept between calls
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for logging."""
        ...

    @abstractmethod
    def validate(self, model: LanguageModel, locale: str) -> list[LintWarning]:
        """Run the check against one locale's model.

        Args:
            model: Parsed language model
            locale: Locale identifier used in messages, e.g. "de"

        Returns:
            List of LintWarning findings (empty if no issues)
        """
        ...

    # ── Helper Methods ──

    def _warning(
        self,
        code: ErrorCode,
        locale: str,
        message: str,
        text: str,
        intent: Optional[str] = None,
        entity_type: Optional[str] = None,
    ) -> LintWarning:
        """Convenience method to create a LintWarning."""
        return LintWarning(
            code=code,
            locale=locale,
            message=message,
            text=text,
            intent=intent,
            entity_type=entity_type,
        )

    @staticmethod
    def _normalize(text: str) -> str:
        """Comparison key: surrounding whitespace trimmed, lower-cased."""
        return text.strip(TRIM_WHITESPACE).lower()

    @staticmethod
    def _has_superfluous_whitespace(text: str) -> bool:
        return text != text.strip(TRIM_WHITESPACE)
