from searchfox_api.errors import InvalidValue
from searchfox_api.models import MatchContext


def normalize_optional_string(raw: str | None) -> str | None:
    """Searchfox sends ``""`` for a missing value; turn it into ``None``."""
    if not raw:
        return None
    return raw


def normalize_context(raw_context: str, raw_symbol: str) -> MatchContext | None:
    """Build a ``MatchContext`` from the wire pair, or ``None`` if both are empty.

    A pair where only one side is populated is rejected rather than guessed at.
    """
    if not raw_context and not raw_symbol:
        return None
    if not raw_context:
        raise InvalidValue(raw_symbol, "an empty symbol when the context is empty")
    if not raw_symbol:
        raise InvalidValue(raw_context, "a non-empty symbol for the context")
    return MatchContext(context=raw_context, symbol=raw_symbol)
