"""Provider base class."""

from typing import ClassVar, Literal

from dishka import Provider

# Components tests can swap for in-memory implementations
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Every provider in ``PROVIDERS`` derives from this.

    A swappable component sets ``__mock_component__`` on its base class;
    each implementation sets ``__is_mock__``.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
