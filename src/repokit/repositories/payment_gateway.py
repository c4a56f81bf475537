"""
repokit.repositories.payment_gateway

Repository for payment-gateway style data sources, which are addressed by a
slug or short code in addition to the regular lookups.
"""

from __future__ import annotations

from repokit.repositories.entity import EntityRepository
from repokit.repositories.interface import ModelT
from repokit.repositories.lookups import SlugLookupMixin


class PaymentGatewayRepository(SlugLookupMixin[ModelT], EntityRepository[ModelT]):
    pass
