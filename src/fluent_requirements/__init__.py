"""Fluent validation of function arguments, state and assertions.

The shared factory's configuration is available as
``fluent_requirements.requirements.configuration()``; at package level the name
``configuration`` refers to the configuration module.
"""

from fluent_requirements.configuration import (
    Configuration,
    ConfigurationUpdater,
    MutableConfiguration,
    UpdaterState,
)
from fluent_requirements.errors import IllegalStateError, MultipleFailuresError
from fluent_requirements.factory import AbstractValidators, Validators
from fluent_requirements.failures import ValidationFailure, ValidationFailures
from fluent_requirements.global_configuration import GlobalConfiguration, get_global_configuration
from fluent_requirements.pluralizer import Pluralizer
from fluent_requirements.protocols import ValidatorProtocol
from fluent_requirements.requirements import (
    assert_that,
    assert_that_and_return,
    check_if,
    check_if_boolean,
    check_if_list,
    check_if_map,
    check_if_number,
    check_if_object,
    check_if_set,
    check_if_string,
    get_validators,
    remove_context,
    require_that,
    require_that_boolean,
    require_that_list,
    require_that_map,
    require_that_number,
    require_that_object,
    require_that_set,
    require_that_string,
    update_configuration,
    with_context,
)
from fluent_requirements.string_mappers import MutableStringMappers, StringMappers
from fluent_requirements.target import ValidationTarget
from fluent_requirements.terminal import TerminalEncoding
from fluent_requirements.type_info import Type, TypeCategory
from fluent_requirements.validators import (
    AbstractCollectionValidator,
    AbstractValidator,
    BooleanValidator,
    ClassValidator,
    InetAddressValidator,
    ListValidator,
    MapValidator,
    NumberValidator,
    ObjectValidator,
    SetValidator,
    SizeValidator,
    StringValidator,
    UriValidator,
)

__all__ = [
    # Entry points
    "assert_that",
    "assert_that_and_return",
    "check_if",
    "check_if_boolean",
    "check_if_list",
    "check_if_map",
    "check_if_number",
    "check_if_object",
    "check_if_set",
    "check_if_string",
    "get_validators",
    "remove_context",
    "require_that",
    "require_that_boolean",
    "require_that_list",
    "require_that_map",
    "require_that_number",
    "require_that_object",
    "require_that_set",
    "require_that_string",
    "update_configuration",
    "with_context",
    # Factories
    "AbstractValidators",
    "Validators",
    # Validators
    "AbstractCollectionValidator",
    "AbstractValidator",
    "BooleanValidator",
    "ClassValidator",
    "InetAddressValidator",
    "ListValidator",
    "MapValidator",
    "NumberValidator",
    "ObjectValidator",
    "SetValidator",
    "SizeValidator",
    "StringValidator",
    "UriValidator",
    "ValidatorProtocol",
    # Configuration
    "Configuration",
    "ConfigurationUpdater",
    "GlobalConfiguration",
    "MutableConfiguration",
    "MutableStringMappers",
    "StringMappers",
    "TerminalEncoding",
    "UpdaterState",
    "get_global_configuration",
    # Failures
    "IllegalStateError",
    "MultipleFailuresError",
    "ValidationFailure",
    "ValidationFailures",
    # Supporting types
    "Pluralizer",
    "Type",
    "TypeCategory",
    "ValidationTarget",
]

__version__ = "0.1.0"
