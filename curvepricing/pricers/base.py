"""Base class for product pricers registered with the PricingEngine."""

from __future__ import annotations

from abc import ABC, abstractmethod

from curvepricing.currency import MultiCurrencyAmount
from curvepricing.interfaces import PricingEnvironment, Product
from curvepricing.sensitivity import PointSensitivities


class BasePricer(ABC):
    """Abstract base class for product pricers.

    Subclasses implement can_price() and the product-level measures for the
    product types they handle. Pricers are stateless apart from the pricers
    they are built from, so one instance can be shared across threads.
    """

    @abstractmethod
    def can_price(self, product: Product) -> bool:
        """Return True if this pricer handles the product type."""
        ...

    @abstractmethod
    def npv(self, product: Product, env: PricingEnvironment) -> MultiCurrencyAmount:
        """Present value, one amount per currency."""
        ...

    @abstractmethod
    def npv_sensitivity(self, product: Product, env: PricingEnvironment) -> PointSensitivities:
        """Point sensitivities of the present value."""
        ...
