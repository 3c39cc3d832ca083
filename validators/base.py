"""
Ordered validation pipelines.

A step is a callable taking the entity and either raising a ModelError or
normalizing the entity in place. ``run_validators`` stops at the first
raised error; steps that already ran are not undone.
"""

from typing import Callable, TypeVar

T = TypeVar("T")

ValidateFunc = Callable[[T], None]


def run_validators(entity: T, *steps: ValidateFunc) -> T:
    for step in steps:
        step(entity)
    return entity


def id_greater_than(n: int, error_cls) -> ValidateFunc:
    """Build a step rejecting entities whose ID is not above ``n``.

    Guards deletes: an unset ID must never reach the store.
    """

    def check(entity) -> None:
        if not entity.id or entity.id <= n:
            raise error_cls()

    return check
