"""Named, dynamically typed per-element property arrays."""

from __future__ import annotations

import copy
from typing import Any, Iterator, List, Optional


def _fresh(value: Any) -> Any:
    return copy.deepcopy(value)


class PropertyArray:
    """A named array of values sharing one default value."""

    def __init__(self, name: str, default: Any = None, value_type: Optional[type] = None):
        if default is None and value_type is not None and value_type is not type(None):
            default = value_type()
        if value_type is None:
            value_type = type(default) if default is not None else object
        self.name = name
        self.default = default
        self.value_type = value_type
        self._data: List[Any] = []

    def reserve(self, n: int) -> None:
        """Hint the expected capacity; lists grow on demand, so nothing is done."""

    def resize(self, n: int) -> None:
        """Resize to n elements, filling new slots with the default value."""
        if n < len(self._data):
            del self._data[n:]
        else:
            self._data.extend(_fresh(self.default) for _ in range(n - len(self._data)))

    def push_back(self) -> None:
        """Append one element holding the default value."""
        self._data.append(_fresh(self.default))

    def free_memory(self) -> None:
        """Release unused capacity."""
        self._data = list(self._data)

    def swap(self, i0: int, i1: int) -> None:
        """Swap the elements at two positions."""
        self._data[i0], self._data[i1] = self._data[i1], self._data[i0]

    def clone(self) -> "PropertyArray":
        """Return a deep copy of this array."""
        other = PropertyArray(self.name, _fresh(self.default), self.value_type)
        other._data = copy.deepcopy(self._data)
        return other

    def vector(self) -> List[Any]:
        """Return the underlying list of values."""
        return self._data

    def __getitem__(self, idx: int) -> Any:
        return self._data[idx]

    def __setitem__(self, idx: int, value: Any) -> None:
        self._data[idx] = value

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)


class Property:
    """A handle to a property array; invalid when it refers to nothing."""

    def __init__(self, array: Optional[PropertyArray] = None):
        self.array = array

    def reset(self) -> None:
        """Make this handle invalid."""
        self.array = None

    def _checked(self) -> PropertyArray:
        if self.array is None:
            raise ValueError("access through an invalid property")
        return self.array

    def __bool__(self) -> bool:
        return self.array is not None

    def __getitem__(self, i: int) -> Any:
        return self._checked()[i]

    def __setitem__(self, i: int, value: Any) -> None:
        self._checked()[i] = value

    def vector(self) -> List[Any]:
        """Return the underlying list of values."""
        return self._checked().vector()

    @property
    def name(self) -> str:
        return self._checked().name


class PropertyContainer:
    """A set of property arrays kept at a common size."""

    def __init__(self) -> None:
        self._arrays: List[PropertyArray] = []
        self._size = 0

    def copy(self) -> "PropertyContainer":
        """Return a deep copy of the container and all its arrays."""
        other = PropertyContainer()
        other._arrays = [a.clone() for a in self._arrays]
        other._size = self._size
        return other

    __copy__ = copy

    def size(self) -> int:
        """Return the current number of elements in each array."""
        return self._size

    def n_properties(self) -> int:
        """Return the number of property arrays."""
        return len(self._arrays)

    def properties(self) -> List[str]:
        """Return the names of all properties in insertion order."""
        return [a.name for a in self._arrays]

    def _find(self, name: str) -> Optional[PropertyArray]:
        return next((a for a in self._arrays if a.name == name), None)

    def add(self, name: str, default: Any = None, value_type: Optional[type] = None) -> Property:
        """Add a property; raises ValueError if the name is already taken."""
        if self._find(name) is not None:
            raise ValueError(f'a property with name "{name}" already exists')
        array = PropertyArray(name, default, value_type)
        array.resize(self._size)
        self._arrays.append(array)
        return Property(array)

    def exists(self, name: str) -> bool:
        """Return True if a property with this name exists."""
        return self._find(name) is not None

    def get(self, name: str, value_type: Optional[type] = None) -> Property:
        """Return the named property, or an invalid one if missing or of another type."""
        array = self._find(name)
        if array is None:
            return Property()
        if value_type is not None and not issubclass(array.value_type, value_type):
            return Property()
        return Property(array)

    def get_or_add(
        self, name: str, default: Any = None, value_type: Optional[type] = None
    ) -> Property:
        """Return the named property, adding it first if it does not exist."""
        prop = self.get(name, value_type)
        if not prop:
            prop = self.add(name, default, value_type)
        return prop

    def get_type(self, name: str) -> Optional[type]:
        """Return the value type of the named property, or None if it does not exist."""
        array = self._find(name)
        return array.value_type if array is not None else None

    def remove(self, prop: Property) -> None:
        """Delete the array a property refers to and invalidate the handle."""
        for i, array in enumerate(self._arrays):
            if array is prop.array:
                del self._arrays[i]
                prop.reset()
                break

    def clear(self) -> None:
        """Remove all properties and reset the size to zero."""
        self._arrays.clear()
        self._size = 0

    def reserve(self, n: int) -> None:
        """Reserve capacity for n elements in all arrays."""
        for array in self._arrays:
            array.reserve(n)

    def resize(self, n: int) -> None:
        """Resize all arrays to n elements."""
        for array in self._arrays:
            array.resize(n)
        self._size = n

    def free_memory(self) -> None:
        """Release unused capacity in all arrays."""
        for array in self._arrays:
            array.free_memory()

    def push_back(self) -> None:
        """Append one default element to every array."""
        for array in self._arrays:
            array.push_back()
        self._size += 1

    def swap(self, i0: int, i1: int) -> None:
        """Swap elements i0 and i1 in all arrays."""
        for array in self._arrays:
            array.swap(i0, i1)