"""Render configuration records in the formats the update bot loads."""

import json
from collections.abc import Iterator, Sequence

from renovate_config.models.config import RenovateConfig
from renovate_config.models.definition import ConfigDefinition, SecretRef

INDENT = "    "

JS_ESCAPES = {
    "\\": "\\\\",
    "'": "\\'",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _js_char(char: str) -> str:
    if char in JS_ESCAPES:
        return JS_ESCAPES[char]
    if ord(char) < 0x20 or ord(char) == 0x7F:
        return f"\\u{ord(char):04x}"
    return char


def _js_string(value: str) -> str:
    escaped = "".join(_js_char(char) for char in value)
    return f"'{escaped}'"


def _js_secret(ref: SecretRef) -> str:
    return f"process.env.{ref.env}"


def _js_string_list(values: Sequence[str]) -> str:
    return "[" + ", ".join(_js_string(v) for v in values) + "]"


def _js_lines(definition: ConfigDefinition) -> Iterator[str]:
    yield "module.exports = {"
    yield f"{INDENT}platform: {_js_string(definition.platform)},"
    yield f"{INDENT}endpoint: {_js_string(definition.endpoint)},"
    yield f"{INDENT}token: {_js_secret(definition.token)},"
    yield f"{INDENT}hostRules: ["
    for rule in definition.host_rules:
        yield f"{INDENT * 2}{{"
        yield f"{INDENT * 3}hostType: {_js_string(rule.host_type)},"
        yield f"{INDENT * 3}matchHost: {_js_string(rule.match_host)},"
        yield f"{INDENT * 3}username: {_js_string(rule.username)},"
        yield f"{INDENT * 3}password: {_js_secret(rule.password)},"
        yield f"{INDENT * 2}}},"
    yield f"{INDENT}],"
    yield f"{INDENT}repositories: {_js_string_list(definition.repositories)},"
    yield "};"


def render_js_module(definition: ConfigDefinition) -> str:
    """Render a definition as a ``config.js`` module.

    Secrets are emitted as ``process.env`` lookups, so the output never
    contains a secret value.
    """
    return "\n".join(_js_lines(definition)) + "\n"


def render_json(config: RenovateConfig, *, reveal_secrets: bool = False) -> str:
    """Render a resolved record as JSON, masking secrets by default."""
    return (
        json.dumps(config.to_renovate_dict(reveal_secrets=reveal_secrets), indent=2)
        + "\n"
    )
