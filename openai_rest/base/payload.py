"""
Selective-field request payloads.

Purpose
-------
Request bodies of the remote API carry a handful of mandatory fields and many
optional ones. A payload must emit exactly the mandatory fields plus the
optional fields the caller actually set: an unset field is absent from the
JSON object, never ``null``.

Design
------
- ``Payload`` is a frozen Pydantic v2 ``BaseModel``. Presence is tracked by
  Pydantic's "fields set" record (``model_fields_set``), not by a sentinel
  value, so ``""``/``[]``/``{}`` are present values distinct from absence.
- ``None`` is the spelling of "absent" for optional fields: passing it to the
  constructor or to a setter leaves (or makes) the field unset.
- Builder steps never mutate: ``set`` and the generated ``with_<field>``
  setters return a new instance, so chains read left to right.
- Serialization (``to_dict``) uses ``exclude_unset`` and declaration order;
  setter order never affects the emitted keys or their order.

No range validation is performed locally (e.g. sampling temperature); the
remote service is the source of truth. Type validation follows the field
annotations and raises ``pydantic.ValidationError``.
"""
from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, Optional, Tuple, TypeVar

from pydantic import BaseModel, ConfigDict

P = TypeVar("P", bound="Payload")


def _fluent_setter(name: str) -> Callable[..., Any]:
    def setter(self, value):
        return self.set(**{name: value})

    setter.__name__ = f"with_{name}"
    setter.__qualname__ = f"Payload.with_{name}"
    setter.__doc__ = f"Return a copy with ``{name}`` set (``None`` clears it)."
    return setter


class Payload(BaseModel):
    """Base class for request bodies with selectively emitted fields.

    Subclasses declare mandatory fields without a default and optional fields
    as ``Optional[...] = None``. A ``with_<field>`` setter is generated for
    every optional field.

    Example::

        req = (
            ChatCompletionRequest(model="gpt-x", messages=[{"role": "user", "content": "hi"}])
            .with_temperature(0.5)
            .with_stream(True)
        )
        req.to_dict()
        # {"model": "gpt-x", "messages": [...], "temperature": 0.5, "stream": True}
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        for name in cls.optional_fields():
            setter_name = f"with_{name}"
            if setter_name not in cls.__dict__:
                setattr(cls, setter_name, _fluent_setter(name))

    def model_post_init(self, context: Any, /) -> None:
        optional = type(self).optional_fields()
        absent = [name for name in self.__pydantic_fields_set__ if name in optional and getattr(self, name) is None]
        self.__pydantic_fields_set__.difference_update(absent)

    # ------------------------------------------------------------------ builder

    def set(self: P, **values: Any) -> P:
        """Return a copy with the given fields updated.

        ``None`` marks an optional field absent. Unknown names raise
        ``TypeError``; the last write of a field wins.
        """
        cls = type(self)
        unknown = sorted(name for name in values if name not in cls.model_fields)
        if unknown:
            raise TypeError(f"{cls.__name__} has no field(s): {', '.join(unknown)}")
        data = {name: getattr(self, name) for name in self.model_fields_set}
        data.update(values)
        return cls(**data)

    # ---------------------------------------------------------------- inspection

    @classmethod
    def mandatory_fields(cls) -> Tuple[str, ...]:
        """Names of the fields that are always emitted, in declaration order."""
        return tuple(name for name, info in cls.model_fields.items() if info.is_required())

    @classmethod
    def optional_fields(cls) -> Tuple[str, ...]:
        """Names of the fields emitted only when set, in declaration order."""
        return tuple(name for name, info in cls.model_fields.items() if not info.is_required())

    def is_set(self, name: str) -> bool:
        """Return True when ``name`` will appear in the serialized body."""
        return name in self.model_fields_set

    # ------------------------------------------------------------- serialization

    def to_dict(self, exclude: Optional[Iterable[str]] = None) -> Dict[str, Any]:
        """Return the wire object: mandatory fields plus present optional fields.

        Parameters:
            exclude: Field names to leave out even when present. Used by the
                "modify" endpoints whose body is a subset of the create body.
        """
        return self.model_dump(
            mode="python",
            exclude_unset=True,
            exclude=set(exclude) if exclude else None,
        )


__all__ = ["Payload"]
