"""Per-render state: the component context and the layout path override."""

from collections.abc import Iterator, Mapping, MutableMapping
from dataclasses import dataclass
from typing import Any


class ComponentContext(MutableMapping[str, Any]):
    """Attribute mapping that feeds a rendered Tiles page.

    Templates receive the context as ``tiles`` and read attributes either
    as ``tiles.body`` or ``tiles["body"]``.
    """

    def __init__(self, attributes: Mapping[str, Any] | None = None):
        self._attributes: dict[str, Any] = dict(attributes or {})

    def __getitem__(self, key: str) -> Any:
        return self._attributes[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self._attributes[key] = value

    def __delitem__(self, key: str) -> None:
        del self._attributes[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._attributes)

    def __len__(self) -> int:
        return len(self._attributes)

    def __repr__(self) -> str:
        return f"ComponentContext({self._attributes!r})"

    def get_attribute(self, name: str, default: Any = None) -> Any:
        return self._attributes.get(name, default)

    def put_attribute(self, name: str, value: Any) -> None:
        self._attributes[name] = value

    def add_all(self, attributes: Mapping[str, Any] | None) -> None:
        """Copy every attribute, replacing existing values."""
        if attributes:
            self._attributes.update(attributes)

    def add_missing(self, attributes: Mapping[str, Any] | None) -> list[str]:
        """Copy only attributes whose names are not present yet.

        Returns:
            Names of the attributes that were added
        """
        added = []
        for key, value in (attributes or {}).items():
            if key not in self._attributes:
                self._attributes[key] = value
                added.append(key)
        return added


@dataclass
class RenderState:
    """State for a single render, passed explicitly through the view call chain.

    Attributes:
        component_context: Context shared by nested definitions in this render,
            created by the first view that needs it
        path_override: Layout path that supersedes the definition's default path;
            set by a controller through TilesView.set_path()
    """

    component_context: ComponentContext | None = None
    path_override: Any = None
