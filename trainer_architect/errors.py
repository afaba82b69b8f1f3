"""
errors – Error and notice types for the team generator.

Only ``ConfigurationError`` is ever raised out of a generation request.
The notice classes are *recorded*, not raised: the pipeline instantiates
them, logs them and attaches them to member/team provenance so callers can
inspect what degraded after the fact.
"""

from __future__ import annotations

from typing import Any, Dict


class ConfigurationError(ValueError):
    """Malformed request, archetype or settings.  Rejected before selection."""


class TrainerArchitectNotice(UserWarning):
    """Base class for the non-fatal conditions a request can run into."""

    code = "notice"

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            data["details"] = dict(self.details)
        return data

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class EmptyCandidatePoolWarning(TrainerArchitectNotice):
    """No species matched the filters; the safe-species fallback was used."""

    code = "empty_candidate_pool"


class EvolutionChainIntegrityWarning(TrainerArchitectNotice):
    """A chain walk hit the hop limit or looped; the species was left as-is."""

    code = "evolution_chain_integrity"


class MovesetFallbackNotice(TrainerArchitectNotice):
    """The moveset came from the type heuristic instead of a learnset."""

    code = "moveset_fallback"


class HabitatReconciliationNotice(TrainerArchitectNotice):
    """Requested habitats clashed with the archetype and were widened."""

    code = "habitat_reconciled"
