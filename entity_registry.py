"""Registry of the category kinds managed by the admin panel.

Each kind defines which backend endpoints serve it, the key its list
response is wrapped in, and the record field holding its name. The field
names are not uniform across kinds, so every one is spelled out here.
"""
from dataclasses import dataclass
from enum import Enum

from errors import ConfigurationError


class CategoryKind(str, Enum):
    BUSINESS = "business"
    SERVICE = "service"
    PRODUCT = "product"


DEFAULT_KIND = CategoryKind.BUSINESS


@dataclass(frozen=True)
class CategoryConfig:
    kind: CategoryKind
    list_endpoint: str
    create_endpoint: str
    update_template: str        # formatted with id=
    delete_template: str        # formatted with id=
    list_response_key: str      # key wrapping the list in GET responses
    name_field: str             # record field holding the display name
    tab_label: str              # shown on the tab bar
    heading: str                # page heading
    plural: str                 # used in "Total ..." counter
    field_label: str            # form input label
    sort_order: int = 0

    def update_endpoint(self, item_id):
        return self.update_template.format(id=item_id)

    def delete_endpoint(self, item_id):
        return self.delete_template.format(id=item_id)


# All category kinds, ordered by sort_order.
CATEGORY_CONFIGS = [
    CategoryConfig(
        kind=CategoryKind.BUSINESS,
        list_endpoint="/category/get-business",
        create_endpoint="/category/create-business",
        update_template="/category/update-business/{id}",
        delete_template="/category/delete-business/{id}",
        list_response_key="business",
        name_field="business",
        tab_label="Business",
        heading="Business",
        plural="Businesses",
        field_label="Business Name",
        sort_order=10,
    ),
    CategoryConfig(
        kind=CategoryKind.SERVICE,
        list_endpoint="/category/get-service",
        create_endpoint="/category/create-service",
        update_template="/category/update-service/{id}",
        delete_template="/category/delete-service/{id}",
        list_response_key="services",
        name_field="service",
        tab_label="Service",
        heading="Services",
        plural="Services",
        field_label="Service Name",
        sort_order=20,
    ),
    CategoryConfig(
        kind=CategoryKind.PRODUCT,
        list_endpoint="/category/get-product",
        create_endpoint="/category/create-product",
        update_template="/category/update-product/{id}",
        delete_template="/category/delete-product/{id}",
        list_response_key="products",
        name_field="products",
        tab_label="Products",
        heading="Products",
        plural="Products",
        field_label="Product Name",
        sort_order=30,
    ),
]

# Quick lookup by kind
CATEGORY_MAP = {cfg.kind: cfg for cfg in CATEGORY_CONFIGS}


def to_kind(kind):
    """Coerce a CategoryKind or its string value; raise ConfigurationError otherwise."""
    if isinstance(kind, CategoryKind):
        return kind
    try:
        return CategoryKind(kind)
    except ValueError:
        raise ConfigurationError(f"Unknown category kind: {kind!r}") from None


def resolve_category(kind):
    """Return the CategoryConfig for a kind."""
    return CATEGORY_MAP[to_kind(kind)]
