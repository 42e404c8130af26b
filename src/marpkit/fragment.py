"""`fragment` local directive for Marp decks.

Marpit turns every list item that starts with ``*`` (or ``1)``) into a
fragment, and its rule cannot be switched on and off per slide while
rendering. This plugin adds a ``fragment`` local directive and a core rule,
run right after ``marpit_fragment``, that removes the already assigned
fragment marker on slides where the directive is false::

    <!-- fragment: false -->

Each slide uses its own directive, or the default when it declares none.
The previous slide's value is never carried over.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Callable, Protocol

from marpkit.logging import get_logger
from marpkit.models.tokens import META_DIRECTIVES, META_FRAGMENT, META_SLIDE, TokenKind

logger = get_logger(__name__)

DIRECTIVE_NAME = "fragment"
ANCHOR_RULE = "marpit_fragment"
RULE_NAME = "remove_marpit_fragment"
DEFAULT_FRAGMENT_STATE = True

DirectiveParser = Callable[[Any], dict[str, Any]]
CoreRule = Callable[[Any], None]


class DirectiveHost(Protocol):
    """What a rendering engine must expose to accept this plugin."""

    def register_local_directive(self, name: str, parser: DirectiveParser) -> None:
        """Install a local directive parser under ``name``."""

    def register_rule_after(self, anchor: str, name: str, rule: CoreRule) -> None:
        """Install a core rule ``name`` running right after ``anchor``."""


def parse_fragment_directive(value: Any) -> dict[str, Any]:
    """Parse the raw value of a ``fragment`` directive.

    Returns ``{"fragment": bool}`` for ``true``/``false`` in any case and an
    empty dict for everything else, so unknown values are ignored.
    """

    normalized = value.lower() if isinstance(value, str) else ""
    if normalized in ("true", "false"):
        return {DIRECTIVE_NAME: normalized == "true"}
    return {}


def _section_directives(meta: Mapping[str, Any]) -> Mapping[str, Any] | None:
    slide = meta.get(META_SLIDE)
    directives = meta.get(META_DIRECTIVES)
    # bool is an int subclass but never a slide index
    if isinstance(slide, int) and not isinstance(slide, bool) and isinstance(directives, Mapping):
        return directives
    return None


def propagate_fragment_state(tokens: Iterable[Any], default: bool = DEFAULT_FRAGMENT_STATE) -> None:
    """Clear fragment markers of list items on slides with fragments disabled.

    Tokens are mutated in place. Running the pass again is a no-op.

    Args:
        tokens: Host tokens exposing ``type`` and ``meta``.
        default: Fragment state for slides without a ``fragment`` directive.
    """

    enabled = default
    for token in tokens:
        meta = getattr(token, "meta", None)
        if not isinstance(meta, Mapping):
            continue

        directives = _section_directives(meta)
        if directives is not None:
            enabled = bool(directives[DIRECTIVE_NAME]) if DIRECTIVE_NAME in directives else default

        if not enabled and getattr(token, "type", None) == TokenKind.LIST_ITEM.value and meta.get(META_FRAGMENT):
            meta[META_FRAGMENT] = False  # type: ignore[index]


def make_fragment_rule(default: bool = DEFAULT_FRAGMENT_STATE) -> CoreRule:
    """Build the core rule bound to ``default``."""

    def remove_marpit_fragment(state: Any) -> None:
        if getattr(state, "inlineMode", False):
            return
        propagate_fragment_state(getattr(state, "tokens", None) or (), default)

    return remove_marpit_fragment


def register_fragment_directive(engine: DirectiveHost, default: bool | None = None) -> DirectiveHost:
    """Install the ``fragment`` directive and its core rule on ``engine``.

    Args:
        engine: Rendering host.
        default: Fragment state for slides without the directive. Falls back
            to ``Settings.fragment_default``.

    Returns:
        The same engine, for chaining.
    """

    if default is None:
        from marpkit.config import load_settings

        default = load_settings().fragment_default

    engine.register_local_directive(DIRECTIVE_NAME, parse_fragment_directive)
    engine.register_rule_after(ANCHOR_RULE, RULE_NAME, make_fragment_rule(default))
    logger.debug("Registered %s directive (default=%s)", DIRECTIVE_NAME, default)
    return engine
