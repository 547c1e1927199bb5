#
# src/stubverify/__init__.py
#
"""
stubverify: fake objects with canned responses, flexible argument matching
and after-the-fact call verification.
"""
from .config import GlobalConfig, StubVerifyConfig, load_config
from .exceptions import (
    ConfigurationError,
    InvalidStubConfiguration,
    RegistryClosedError,
    StubVerifyError,
    UnknownFakeError,
    UnmatchedCallOnStrictFake,
    VerificationFailure,
)
from .fakes import FakeObject, PartialFake
from .matchers import (
    AnyArgs,
    Anything,
    ArgumentList,
    ArrayIncluding,
    ExactValue,
    HashIncluding,
    InstanceOf,
    Satisfying,
    any_args,
    anything,
    array_including,
    hash_including,
    instance_of,
    satisfying,
)
from .models import (
    CallCount,
    CallRecord,
    FixedResponse,
    RaiseResponse,
    SequenceResponse,
    StubRule,
    at_least,
    at_most,
    exactly,
    never,
    once,
    twice,
)
from .registry import Registry

__all__ = [
    "AnyArgs",
    "Anything",
    "ArgumentList",
    "ArrayIncluding",
    "CallCount",
    "CallRecord",
    "ConfigurationError",
    "ExactValue",
    "FakeObject",
    "FixedResponse",
    "GlobalConfig",
    "HashIncluding",
    "InstanceOf",
    "InvalidStubConfiguration",
    "PartialFake",
    "RaiseResponse",
    "Registry",
    "RegistryClosedError",
    "Satisfying",
    "SequenceResponse",
    "StubRule",
    "StubVerifyConfig",
    "StubVerifyError",
    "UnknownFakeError",
    "UnmatchedCallOnStrictFake",
    "VerificationFailure",
    "any_args",
    "anything",
    "array_including",
    "at_least",
    "at_most",
    "exactly",
    "hash_including",
    "instance_of",
    "load_config",
    "never",
    "once",
    "satisfying",
    "twice",
]

# 🔼⚙️
