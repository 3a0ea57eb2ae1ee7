from typing import Annotated

from pydantic import Field, TypeAdapter

UINT64_MAX = 2**64 - 1

# A stored multiplicity or an amount passed to inc/dec.
Multiplicity = Annotated[int, Field(strict=True, ge=0, le=UINT64_MAX)]

# Signed change accepted by inc_dec; its magnitude must fit a multiplicity.
Delta = Annotated[int, Field(strict=True, ge=-UINT64_MAX, le=UINT64_MAX)]

multiplicity_adapter = TypeAdapter(Multiplicity)
delta_adapter = TypeAdapter(Delta)


def validate_amount(amount):
    """Return amount if it is a valid unsigned 64-bit int, else raise ValidationError."""
    return multiplicity_adapter.validate_python(amount)


def validate_delta(delta):
    return delta_adapter.validate_python(delta)
