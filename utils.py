#utils.py
import logging
from typing import Any, Callable, Mapping


class OptionsError(ValueError):
    """A module was configured with missing, unknown or badly specified options."""


def options_filter(options: Mapping[str, Any], rules: Mapping[str, str]) -> Callable[[str], Any]:
    """
    Validate a set of options against rules, so a typo or a forgotten option fails right away.

    Args:
        options (Mapping): option name -> value, as passed by the caller.
        rules (Mapping): option name -> rule. The only rule is "required".

    Returns:
        Callable: ``get(key)`` returning a validated option.
    """
    remaining = dict(options)
    accepted = {}

    for key, rule in rules.items():
        is_set = key in remaining
        if is_set:
            accepted[key] = remaining.pop(key)

        if rule == "required":
            if not is_set:
                raise OptionsError(f"`{key}` is missing")
        else:
            raise OptionsError(f"invalid rule `{rule}`")

    # superfluous options
    if remaining:
        raise OptionsError(f"attempting to set invalid option(s): `{'`, `'.join(remaining)}`")

    def get(key: str) -> Any:
        if key not in accepted:
            raise OptionsError(f"attempting to retrieve invalid option: `{key}`")
        return accepted[key]

    return get


def setup_logging(debug: bool = False) -> None:
    """Configure root logging once for the whole app."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)s:%(name)s:%(message)s",
    )
