"""Name inflection for module, model and controller identifiers.

The rules are deliberately naive: they cover regular English nouns and leave
irregular plurals alone (``"glass"`` singularizes to ``"glas"``).  Only a
single trailing ``s`` is ever removed.
"""

from __future__ import annotations

import re

from .models import NameForm

CONTROLLER_SUFFIX = "Controller"


def class_case(name: str) -> str:
    """Uppercase the first character and leave the rest untouched."""
    return name[:1].upper() + name[1:]


def singularize(name: str) -> str:
    """Strip one trailing ``s`` from names longer than one character."""
    if len(name) > 1 and name.endswith("s"):
        return name[:-1]
    return name


def pluralize(name: str) -> str:
    """Lower-cased plural used for table names.

    ``Category`` -> ``categories``, ``Class`` -> ``classes``,
    ``Box`` -> ``boxes``, ``Post`` -> ``posts``.
    """
    lowered = name.lower()
    if lowered.endswith("y"):
        return lowered[:-1] + "ies"
    if lowered.endswith(("s", "sh", "ch", "x", "z")):
        return lowered + "es"
    return lowered + "s"


def derive(raw: str) -> NameForm:
    """Compute every name variant of *raw* in one go."""
    if not raw:
        raise ValueError("identifier must not be empty")
    singular = singularize(raw)
    class_cased = class_case(singular)
    table_name = pluralize(class_cased)
    return NameForm(
        raw=raw,
        singular=singular,
        plural=table_name,
        class_cased=class_cased,
        table_name=table_name,
    )


# ---------------------------------------------------------------------------
# Controller / migration names
# ---------------------------------------------------------------------------


def strip_controller_suffix(name: str) -> str:
    if name.endswith(CONTROLLER_SUFFIX):
        return name[: -len(CONTROLLER_SUFFIX)]
    return name


def controller_class_name(name: str) -> str:
    """``post`` -> ``PostController``; already-suffixed names are unchanged.

    Raises:
        ValueError: Nothing is left once the suffix is stripped.
    """
    base = strip_controller_suffix(name)
    if not base:
        raise ValueError(f"controller name {name!r} has no base before the suffix")
    return class_case(base) + CONTROLLER_SUFFIX


def controller_model_name(class_name: str) -> str:
    """Model served by a resource controller: ``PostsController`` -> ``Post``."""
    return singularize(strip_controller_suffix(class_name))


def studly_case(name: str) -> str:
    """``create_posts_table`` -> ``CreatePostsTable``."""
    words = re.split(r"[_\-\s]+", name)
    return "".join(class_case(w) for w in words if w)
