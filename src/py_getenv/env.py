"""Environment snapshots, the key-value source that parsing reads.

Every process has an environment: a set of ``KEY=VALUE`` string pairs
inherited from its parent.  Parsing never reads ``os.environ`` live
while it works; it takes a snapshot first and reads from that, so one
parse pass sees one consistent view.

Key design properties:
    - **Snapshot, not view** — ``from_process()`` copies ``os.environ``.
      Later changes to the process environment don't affect it.
    - **Strings only** — both keys and values are strings.
    - **Blank means unset** — ``lookup()`` trims values, so a variable
      set to whitespace reads the same as an absent one.
"""

import os
from collections.abc import Mapping


class Environment:
    """A read-only snapshot of environment variables.

    The snapshot is copied on creation, so later changes to the source
    mapping (or to the real process environment) are not seen.
    """

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        """Create an environment, optionally pre-populated.

        Args:
            initial: Starting variables (copied, not referenced).

        """
        self._vars: dict[str, str] = dict(initial) if initial else {}

    @classmethod
    def from_process(cls) -> "Environment":
        """Return a snapshot of the current process environment."""
        return cls(initial=os.environ)

    def lookup(self, key: str) -> str:
        """Return the value for *key* with surrounding whitespace trimmed.

        An absent variable and a blank one both come back as ``""``.
        """
        return self._vars.get(key, "").strip()
