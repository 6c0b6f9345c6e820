from __future__ import annotations
from typing import Any, ClassVar, Iterator, Sequence, Tuple, cast, Self
from ..conversions import convert
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace, Scalar
from ..utils import get_dimension


class ColorBase:
    __slots__ = ('_value',)  # subclasses keep a __dict__; __setattr__ below enforces immutability

    num_channels: ClassVar[int] = 3
    mode:        ClassVar[ColorSpace]
    _type:       ClassVar[type]
    maxima:      ClassVar[Tuple[Scalar, ...] | None]  # None disables clamping
    null_value:  ClassVar[Tuple[Scalar, ...]]
    format_type: ClassVar[FormatType]
    _is_frozen: bool = False   # class-level default, shadowed per instance once frozen

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: ColorBase | Sequence[Scalar] | None = None) -> None:
        if value is None:
            value = self.null_value

        # ---- Handle ColorBase input ----
        if isinstance(value, ColorBase):
            if value.mode == self.mode:
                value = value.value
            else:
                value = convert(
                    color=value.value,
                    from_space=value.mode,
                    to_space=self.mode,
                    input_type=value.format_type,
                    output_type=self.format_type,
                )

        value_dim = get_dimension(value)
        if value_dim != self.num_channels:
            raise ValueError(
                f"{self.mode} expects {self.num_channels} channels, got {value_dim}"
            )

        # type enforcement
        values = tuple(
            self._type(v) for v in cast(Sequence[Any], value)
        )

        # clamp value
        if self.maxima is not None:
            values = tuple(
                max(0, min(v, m)) for v, m in zip(values, self.maxima)
            )

        # safe assignment; __setattr__ still allows it during init
        self._value = values

        # freeze instance; no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Tuple[Scalar, ...]:
        return self._value

    def __iter__(self) -> Iterator[Scalar]:
        return iter(self._value)

    def __len__(self) -> int:
        return self.num_channels

    def __getitem__(self, index: int) -> Scalar:
        return self._value[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ColorBase):
            return self.mode == other.mode and self._value == other._value
        if isinstance(other, tuple):
            return self._value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}{self._value!r}"

    def to_format(self, format_type: FormatType) -> Tuple[Scalar, ...]:
        """
        Return this color's channels scaled into another format.

        Hue stays in degrees; the remaining channels are rescaled between
        0-255, 0-1 and 0-100.
        """
        return convert(
            self._value,
            from_space=self.mode,
            to_space=self.mode,
            input_type=self.format_type,
            output_type=format_type,
        )

    @classmethod
    def coerce(cls, value: ColorBase | Sequence[Scalar]) -> Self:
        """Return ``value`` unchanged if it is already this class, otherwise build one."""
        if isinstance(value, cls):
            return value
        return cls(value)
