"""Plain-text help for registered environment variables.

``format_usage`` walks a registry through ``Registry.usage`` and renders
one block per variable, in name order::

    Environment variables:
      PORT (int)
            port to listen on
            default: 8080
      TOKEN (string) [required]
            API token

Required variables have no meaningful default, so their ``default:``
line is left out.
"""

from py_getenv.registry import Registry

_INDENT = "  "
_DETAIL_INDENT = "        "


def format_usage(registry: Registry, *, header: str = "Environment variables:") -> str:
    """Render usage text for every binding in *registry*."""
    lines = [header]

    def visit(name: str, description: str, default: object, required: bool) -> None:
        binding = registry.get(name)
        kind = binding.kind if binding is not None else "?"
        marker = " [required]" if required else ""
        lines.append(f"{_INDENT}{name} ({kind}){marker}")
        if description:
            lines.append(f"{_DETAIL_INDENT}{description}")
        if not required:
            lines.append(f"{_DETAIL_INDENT}default: {default!r}")

    registry.usage(visit)
    if len(lines) == 1:
        lines.append(f"{_INDENT}(none)")
    return "\n".join(lines)
