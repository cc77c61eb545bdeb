"""Validator classes.

Validators are created by the factory functions (``require_that()``,
``check_if()``, ``assert_that()``), not directly.
"""

from fluent_requirements.validators.base import AbstractValidator, FailureCollector, require_valid_name
from fluent_requirements.validators.boolean_validator import BooleanValidator
from fluent_requirements.validators.class_validator import ClassValidator
from fluent_requirements.validators.collection_validator import (
    AbstractCollectionValidator,
    ListValidator,
    SetValidator,
)
from fluent_requirements.validators.inet_address_validator import InetAddressValidator
from fluent_requirements.validators.map_validator import MapValidator
from fluent_requirements.validators.number_validator import Comparison, NumberValidator
from fluent_requirements.validators.object_validator import ObjectValidator
from fluent_requirements.validators.size_validator import SizeValidator
from fluent_requirements.validators.string_validator import StringValidator
from fluent_requirements.validators.uri_validator import UriValidator

__all__ = [
    "AbstractCollectionValidator",
    "AbstractValidator",
    "BooleanValidator",
    "ClassValidator",
    "Comparison",
    "FailureCollector",
    "InetAddressValidator",
    "ListValidator",
    "MapValidator",
    "NumberValidator",
    "ObjectValidator",
    "SetValidator",
    "SizeValidator",
    "StringValidator",
    "UriValidator",
    "require_valid_name",
]
