"""
Value Objects
Immutable, self-validating primitives
"""
from nexus_kernel.domain.value_objects.address import Address
from nexus_kernel.domain.value_objects.code import Code
from nexus_kernel.domain.value_objects.color import Color
from nexus_kernel.domain.value_objects.date_range import DateRange
from nexus_kernel.domain.value_objects.email import Email
from nexus_kernel.domain.value_objects.money import Money
from nexus_kernel.domain.value_objects.national_id import CNPJ, CPF
from nexus_kernel.domain.value_objects.percentage import Percentage
from nexus_kernel.domain.value_objects.phone import Phone
from nexus_kernel.domain.value_objects.slug import Slug

__all__ = [
    "Address",
    "CNPJ",
    "CPF",
    "Code",
    "Color",
    "DateRange",
    "Email",
    "Money",
    "Percentage",
    "Phone",
    "Slug",
]
