from code_owners.errors import (
    CodeOwnersError,
    MalformedRuleError,
    PathOutsideScopeError,
    RuleSetParseError,
)
from code_owners.models import ResolvedOwnership, VerificationResult
from code_owners.resolver import OwnershipResolver, normalize_path, resolve, verify
from code_owners.rules.models import Rule, RuleSet
from code_owners.rules.parser import parse

__all__ = [
    "CodeOwnersError",
    "MalformedRuleError",
    "OwnershipResolver",
    "PathOutsideScopeError",
    "ResolvedOwnership",
    "Rule",
    "RuleSet",
    "RuleSetParseError",
    "VerificationResult",
    "normalize_path",
    "parse",
    "resolve",
    "verify",
]
