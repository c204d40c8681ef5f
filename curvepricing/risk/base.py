"""Base class for risk measure implementations."""

from __future__ import annotations

from abc import ABC, abstractmethod

from curvepricing.environment import ImmutablePricingEnvironment
from curvepricing.interfaces import Product


class BaseRiskMeasure(ABC):
    """Base class for bump-and-reprice risk measures.

    Bumps are applied through the copy-on-write `with_*` methods of
    ImmutablePricingEnvironment, so the input environment is never changed.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name."""
        ...

    @abstractmethod
    def compute(self, product: Product, env: ImmutablePricingEnvironment) -> float:
        """Compute the risk measure value in the reporting currency."""
        ...
