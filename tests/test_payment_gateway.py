from __future__ import annotations

import pytest

from repokit.errors import InvalidArgumentError
from repokit.repositories.payment_gateway import PaymentGatewayRepository
from repokit.settings import Settings
from tests.models import Employee, PaymentGateway


@pytest.fixture
def gateways(session, settings) -> PaymentGatewayRepository[PaymentGateway]:
    return PaymentGatewayRepository(session, model=PaymentGateway, settings=settings)


@pytest.mark.asyncio
async def test_get_by_slug(gateways) -> None:
    await gateways.save_all(
        [
            {"slug": "bkash", "code": "BK", "name": "bKash"},
            {"slug": "nagad", "code": "NG", "name": "Nagad"},
        ]
    )

    gw = await gateways.get("nagad")
    assert gw is not None and gw.name == "Nagad"
    assert await gateways.get("rocket") is None

    # Inherited lookups still work against their own columns.
    assert (await gateways.find_by_code("BK")).slug == "bkash"


@pytest.mark.asyncio
async def test_get_with_projection(session, gateways) -> None:
    await gateways.create({"slug": "bkash", "code": "BK", "name": "bKash"})
    session.expunge_all()

    gw = await gateways.get("bkash", columns=["slug"])
    assert set(gw.attributes_to_dict()) == {"id", "slug"}


@pytest.mark.asyncio
async def test_get_skips_trashed(gateways) -> None:
    gw = await gateways.create({"slug": "bkash", "name": "bKash"})
    await gateways.delete_by_id(gw.id)

    assert await gateways.get("bkash") is None


@pytest.mark.asyncio
async def test_slug_column_is_configurable(session, gateways) -> None:
    await gateways.create({"slug": "bkash", "code": "BK", "name": "bKash"})

    by_code = PaymentGatewayRepository(
        session, model=PaymentGateway, settings=Settings(slug_column="code")
    )
    assert (await by_code.get("BK")).slug == "bkash"

    # Employee maps no slug column.
    wrong = PaymentGatewayRepository(session, model=Employee, settings=Settings())
    with pytest.raises(InvalidArgumentError):
        await wrong.get("anything")
