"""Reconcile a stored list field with the incoming list of a partial update.

Rules, applied to the incoming elements one at a time and in order:

- an element with an identity must match a stored element that was not matched
  before; the pair is merged (and the result validated) and takes the position
  of the stored element
- an element with an identity that matches nothing is an undefined reference
- an element without identity is validated on its own and appended after the
  stored elements, in incoming order

Stored elements that no incoming element refers to are kept unchanged and in
place. The first failure aborts the whole field: no partial list is returned.
"""

from __future__ import annotations

import copy
from collections.abc import Callable
from logging import getLogger
from typing import TYPE_CHECKING, Any, Protocol

from wenet_common.config.merge import EmptyListPolicy
from wenet_common.domain.validation import (
    DuplicatedIdentityError,
    UndefinedReferenceError,
    Validable,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from wenet_common.domain.validation import ValidateContext

    from .identity import IdentityPolicy

log = getLogger(__name__)


class MergeableElement[T](Validable, Protocol):
    async def merge(self, source: T, context: ValidateContext) -> T: ...


type FieldBinder[M, T] = Callable[[M, list[T] | None], M]


async def reconcile_list[T: MergeableElement[Any]](
    stored: list[T] | None,
    incoming: Sequence[T] | None,
    *,
    code_prefix: str,
    policy: IdentityPolicy[T],
    context: ValidateContext,
) -> list[T] | None:
    """Return the list to store for a field, or raise the first ``ValidationError``.

    Element failures are coded ``<code_prefix>.<index>`` (index in ``incoming``);
    undefined references are coded ``<code_prefix>_id``. Neither ``stored`` nor
    ``incoming`` is modified.
    """

    if incoming is None:
        return stored
    if not incoming:
        if context.empty_list_policy is EmptyListPolicy.CLEAR:
            log.debug("Clearing %s on empty incoming list", code_prefix)
            return []
        return stored

    merged: list[T] = list(stored or ())
    unmatched = list(range(len(merged)))
    referenced: list[tuple[int, T]] = []
    added: list[T] = []
    for index, element in enumerate(incoming):
        code = f"{code_prefix}.{index}"
        if policy.has_identity(element):
            for previous_index, previous in referenced:
                if policy.same_identity(previous, element):
                    raise DuplicatedIdentityError(
                        code,
                        f"The element {policy.describe(element)} is already defined "
                        f"at {previous_index}.",
                    )
            referenced.append((index, element))
            position = _take_match(merged, unmatched, element, policy)
            if position is None:
                raise UndefinedReferenceError(
                    f"{code_prefix}_id",
                    f"The element at {index} refers to {policy.describe(element)}, "
                    "which is not defined.",
                )
            merged[position] = await merged[position].merge(element, context.with_code(code))
        else:
            candidate = copy.deepcopy(element)
            await candidate.validate(context.with_code(code))
            added.append(candidate)

    log.debug(
        "Merged %s: %d stored, %d updated, %d added",
        code_prefix,
        len(merged),
        len(merged) - len(unmatched),
        len(added),
    )
    return merged + added


def _take_match[T](
    stored: list[T],
    unmatched: list[int],
    element: T,
    policy: IdentityPolicy[T],
) -> int | None:
    for slot, position in enumerate(unmatched):
        if policy.same_identity(stored[position], element):
            del unmatched[slot]
            return position
    return None


async def merge_field_list[M, T: MergeableElement[Any]](
    model: M,
    stored: list[T] | None,
    incoming: Sequence[T] | None,
    *,
    code_prefix: str,
    policy: IdentityPolicy[T],
    bind: FieldBinder[M, T],
    context: ValidateContext,
) -> M:
    """Reconcile one list field and store the result on ``model`` through ``bind``."""

    merged = await reconcile_list(
        stored,
        incoming,
        code_prefix=code_prefix,
        policy=policy,
        context=context,
    )
    return bind(model, merged)
