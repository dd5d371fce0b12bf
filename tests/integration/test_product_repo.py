"""ProductRepository against SQLite: whole-word matching, conjunction, paging, public mapping."""

import pytest

from app.domain.enums import ProductMediaPurpose, ProductStatus
from app.infrastructure.persistence.repositories.product_repo import (
    ProductRepository,
    whole_word_pattern,
)


async def _names(repo: ProductRepository, *terms: str) -> set[str]:
    products, _ = await repo.search_active(list(terms), skip=0, limit=100)
    return {p.name for p in products}


def test_whole_word_pattern_escapes_metacharacters() -> None:
    assert whole_word_pattern("c++") == r"(?i)(^|[^A-Za-z0-9])c\+\+([^A-Za-z0-9]|$)"


async def test_matches_whole_words_only(db_session, seed_products, product_factory) -> None:
    await seed_products(
        product_factory(name="Smartphone X"),
        product_factory(name="Phone Case"),
    )
    repo = ProductRepository(db_session)

    assert await _names(repo, "phone") == {"Phone Case"}


async def test_matching_is_case_insensitive(db_session, seed_products, product_factory) -> None:
    await seed_products(product_factory(name="Phone Case"))
    repo = ProductRepository(db_session)

    assert await _names(repo, "PHONE") == {"Phone Case"}


async def test_every_term_must_match_some_field(db_session, seed_products, product_factory) -> None:
    await seed_products(
        product_factory(name="Galaxy S23", brand="Samsung"),
        product_factory(name="Galaxy Tab", brand="Generic", description="Tablet"),
    )
    repo = ProductRepository(db_session)

    assert await _names(repo, "samsung", "galaxy") == {"Galaxy S23"}
    assert await _names(repo, "galaxy") == {"Galaxy S23", "Galaxy Tab"}
    assert await _names(repo, "samsung", "iphone") == set()


async def test_all_six_fields_are_searched(db_session, seed_products, product_factory) -> None:
    await seed_products(
        product_factory(name="Alpha"),
        product_factory(description="Made of bamboo"),
        product_factory(brand="Acme"),
        product_factory(model="XR200"),
        product_factory(specifications="Weight 2kg, waterproof"),
        product_factory(tags=["wireless", "bluetooth"]),
    )
    repo = ProductRepository(db_session)

    for term in ("alpha", "bamboo", "acme", "xr200", "waterproof", "bluetooth"):
        products, total = await repo.search_active([term], skip=0, limit=10)
        assert total == 1, term
        assert len(products) == 1


@pytest.mark.parametrize("term", ["[", "]", ",", '"'])
async def test_tag_list_punctuation_is_not_searchable(
    db_session, seed_products, product_factory, term
) -> None:
    await seed_products(
        product_factory(name="Desk Lamp", tags=["home", "light"]),
        product_factory(name="Floor Mat", tags=[]),
    )
    repo = ProductRepository(db_session)

    products, total = await repo.search_active([term], skip=0, limit=10)
    assert total == 0
    assert products == []


async def test_tags_are_matched_one_element_at_a_time(
    db_session, seed_products, product_factory
) -> None:
    await seed_products(
        product_factory(name="Desk Lamp", tags=["home", "light"]),
        product_factory(name="Espresso Cup", tags=["café", "kitchen ware"]),
    )
    repo = ProductRepository(db_session)

    assert await _names(repo, "light") == {"Desk Lamp"}
    assert await _names(repo, "café") == {"Espresso Cup"}
    assert await _names(repo, "CAFÉ") == {"Espresso Cup"}
    assert await _names(repo, "ware") == {"Espresso Cup"}
    assert await _names(repo, "home", "light") == {"Desk Lamp"}
    assert await _names(repo, "hom") == set()


async def test_regex_metacharacters_are_literal(db_session, seed_products, product_factory) -> None:
    await seed_products(
        product_factory(name="C++ Book"),
        product_factory(name="Cooking Book"),
    )
    repo = ProductRepository(db_session)

    assert await _names(repo, "c++") == {"C++ Book"}
    assert await _names(repo, "c++", "book") == {"C++ Book"}
    assert await _names(repo, "(unclosed") == set()
    assert await _names(repo, ".*") == set()


async def test_only_active_products_are_returned(db_session, seed_products, product_factory) -> None:
    await seed_products(
        product_factory(name="Desk Lamp"),
        product_factory(name="Floor Lamp", status=ProductStatus.INACTIVE.value),
        product_factory(name="Wall Lamp", status=ProductStatus.ARCHIVED.value),
    )
    repo = ProductRepository(db_session)

    products, total = await repo.search_active(["lamp"], skip=0, limit=10)
    assert total == 1
    assert [p.name for p in products] == ["Desk Lamp"]


async def test_pagination_reports_total_of_all_matches(
    db_session, seed_products, product_factory
) -> None:
    for i in range(5):
        await seed_products(product_factory(name=f"Chair {i}"))
    await seed_products(product_factory(name="Table"))
    repo = ProductRepository(db_session)

    page, total = await repo.search_active(["chair"], skip=2, limit=2)
    assert total == 5
    assert [p.name for p in page] == ["Chair 2", "Chair 3"]

    last, total = await repo.search_active(["chair"], skip=4, limit=2)
    assert total == 5
    assert [p.name for p in last] == ["Chair 4"]


async def test_public_summary_resolves_media_and_hides_internal_fields(
    db_session, seed_products, product_factory
) -> None:
    await seed_products(
        product_factory(
            name="Camera",
            order_count=99,
            images=["https://legacy/1.jpg"],
            pricing_tiers=[{"min_quantity": 10, "price_per_unit": 8.5}],
            media=[
                ("https://cdn/p2.jpg", ProductMediaPurpose.PREVIEW, 2),
                ("https://cdn/t2.jpg", ProductMediaPurpose.THUMBNAIL, 5),
                ("https://cdn/t1.jpg", ProductMediaPurpose.THUMBNAIL, 1),
                ("https://cdn/p1.jpg", ProductMediaPurpose.PREVIEW, 0),
            ],
        )
    )
    repo = ProductRepository(db_session)

    (summary,), _ = await repo.search_active(["camera"], skip=0, limit=1)

    assert summary.thumbnail is not None
    assert summary.thumbnail.url == "https://cdn/t1.jpg"
    assert [m.url for m in summary.previews] == ["https://cdn/p1.jpg", "https://cdn/p2.jpg"]
    assert summary.pricing_tiers[0].min_quantity == 10
    assert summary.pricing_tiers[0].price_per_unit == pytest.approx(8.5)
    assert not hasattr(summary, "order_count")
    assert not hasattr(summary, "images")
    assert summary.created_at is not None
    assert summary.created_at.tzinfo is not None


async def test_iter_searchable_text_includes_inactive_products(
    db_session, seed_products, product_factory
) -> None:
    await seed_products(
        product_factory(name="Active Kettle", tags=["kitchen"]),
        product_factory(name="Retired Toaster", status=ProductStatus.INACTIVE.value),
    )
    repo = ProductRepository(db_session)

    items = [item async for item in repo.iter_searchable_text()]

    assert {item.name for item in items} == {"Active Kettle", "Retired Toaster"}
    kettle = next(item for item in items if item.name == "Active Kettle")
    assert kettle.tags == ["kitchen"]
