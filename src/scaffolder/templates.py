"""Stub template loading and placeholder substitution.

Provides the TemplateRenderer class which locates ``<name>.stub`` files via a
Jinja2 ``FileSystemLoader`` (user override directories first, then the
packaged ``src/scaffolder/templates/`` directory) and fills ``{{TOKEN}}``
placeholders in them.

Substitution is literal rather than Jinja2 syntax: the stubs are PHP source
and must come out byte-for-byte except for the mapped tokens.  Tokens missing
from the mapping are left in place and replacement values are never scanned
again, so a value that itself contains ``{{X}}`` is inserted verbatim.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from pathlib import Path

from jinja2 import Environment, FileSystemLoader
from jinja2 import TemplateNotFound as JinjaTemplateNotFound

from .errors import TemplateNotFound


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

STUB_SUFFIX = ".stub"

_PLACEHOLDER_RE = re.compile(r"\{\{([A-Za-z0-9_]+)\}\}")


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders stub templates for module scaffolding.

    Templates are addressed by bare name (``"model"`` resolves to
    ``model.stub``).  When several directories provide the same stub the
    first one on the search path wins, which is how projects override the
    packaged stubs.
    """

    def __init__(self, template_dirs: list[str | Path] | None = None) -> None:
        search_path = [Path(d) for d in (template_dirs or [])]
        search_path.append(_DEFAULT_TEMPLATE_DIR)
        self.search_path = search_path
        # Stubs are never compiled; the environment only resolves them.
        self.env = Environment(
            loader=FileSystemLoader([str(p) for p in search_path], encoding="utf-8"),
        )
        self._sources: dict[str, str] = {}

    # -- Loading -------------------------------------------------------------

    def load(self, name: str) -> str:
        """Return the raw body of the stub called *name*.

        Raises:
            TemplateNotFound: No directory on the search path has the stub.
        """
        if name not in self._sources:
            try:
                source, _filename, _uptodate = self.env.loader.get_source(
                    self.env, name + STUB_SUFFIX
                )
            except JinjaTemplateNotFound as exc:
                raise TemplateNotFound(name, self.search_path) from exc
            self._sources[name] = source
        return self._sources[name]

    # -- Rendering -----------------------------------------------------------

    def render(self, name: str, placeholders: Mapping[str, str]) -> str:
        """Render the stub *name* with *placeholders*."""
        return self.render_string(self.load(name), placeholders)

    def render_string(self, body: str, placeholders: Mapping[str, str]) -> str:
        """Substitute ``{{KEY}}`` for every key of *placeholders* in *body*.

        A single pass over *body* handles all keys, so the result does not
        depend on mapping order and inserted values are never re-expanded.
        """
        if not placeholders:
            return body
        tokens = {"{{" + key + "}}": str(value) for key, value in placeholders.items()}
        # Longest first so overlapping keys cannot shadow each other.
        pattern = re.compile(
            "|".join(re.escape(t) for t in sorted(tokens, key=len, reverse=True))
        )
        return pattern.sub(lambda m: tokens[m.group(0)], body)

    # -- Utility -------------------------------------------------------------

    def list_templates(self) -> list[str]:
        """Return the sorted names of every stub visible on the search path."""
        return sorted(
            name[: -len(STUB_SUFFIX)]
            for name in self.env.loader.list_templates()
            if name.endswith(STUB_SUFFIX)
        )

    def source_of(self, name: str) -> Path:
        """Return the file that *name* resolves to."""
        try:
            _source, filename, _uptodate = self.env.loader.get_source(
                self.env, name + STUB_SUFFIX
            )
        except JinjaTemplateNotFound as exc:
            raise TemplateNotFound(name, self.search_path) from exc
        return Path(filename)


def find_placeholders(body: str) -> set[str]:
    """Return the names of all ``{{TOKEN}}`` placeholders in *body*."""
    return set(_PLACEHOLDER_RE.findall(body))
