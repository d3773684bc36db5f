"""
Organization-scoped product catalog

Every query issued here carries the caller's organization id as a filter,
in the same statement as any id lookup.
"""

import logging
from typing import Any, Dict, List

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Query, Session

from inventory_tracker.core.errors import ConflictError, NotFoundError, StoreError, ValidationError
from inventory_tracker.models.product import Product
from inventory_tracker.schemas.product import ProductCreate, ProductUpdate
from inventory_tracker.services.dashboard import (
    DEFAULT_LOW_STOCK_THRESHOLD,
    InventorySummary,
    summarize_inventory,
)

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "sku")


class CatalogService:
    """
    Product CRUD and dashboard for a single organization
    """

    def __init__(
        self,
        db: Session,
        organization_id: int,
        default_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
    ):
        if organization_id is None:
            raise ValueError("organization_id is required for catalog access")
        self.db = db
        self.organization_id = organization_id
        self.default_threshold = default_threshold

    def _scoped(self) -> Query:
        return self.db.query(Product).filter(Product.organization_id == self.organization_id)

    def _commit(self, action: str) -> None:
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise ConflictError("SKU already exists in this organization")
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"{action} failed for organization {self.organization_id}: {e}", exc_info=True)
            raise StoreError(f"{action} failed")

    def create(self, data: ProductCreate) -> Product:
        """
        Create a product owned by the caller's organization

        Args:
            data: Product fields; any organization reference in client input is ignored

        Returns:
            Stored product with generated id and timestamps
        """
        if not data.name or not data.name.strip() or not data.sku or not data.sku.strip():
            raise ValidationError("Name and SKU are required")

        product = Product(
            organization_id=self.organization_id,
            name=data.name,
            sku=data.sku,
            description=data.description or None,
            quantity_on_hand=data.quantity_on_hand if data.quantity_on_hand is not None else 0,
            cost_price=data.cost_price,
            selling_price=data.selling_price,
            low_stock_threshold=data.low_stock_threshold,
        )
        self.db.add(product)
        self._commit("Create product")
        self.db.refresh(product)

        logger.info(f"Created product {product.id} in organization {self.organization_id}")
        return product

    def list(self) -> List[Product]:
        """All products of the organization, most recently created first"""
        try:
            return (
                self._scoped()
                .order_by(Product.created_at.desc(), Product.id.desc())
                .all()
            )
        except SQLAlchemyError as e:
            logger.error(f"List products failed for organization {self.organization_id}: {e}", exc_info=True)
            raise StoreError("List products failed")

    def update(self, product_id: int, data: ProductUpdate) -> Product:
        """
        Apply a partial update to one of the organization's products

        Only fields present in the request are written; an explicit null
        clears an optional field.

        Raises:
            NotFoundError: If the id does not belong to the caller's organization
            ValidationError: If name or sku would become empty
        """
        changes: Dict[str, Any] = data.model_dump(exclude_unset=True)
        for key in REQUIRED_FIELDS:
            if key in changes and (changes[key] is None or not changes[key].strip()):
                raise ValidationError("Name and SKU cannot be empty")

        try:
            product = (
                self._scoped()
                .filter(Product.id == product_id)
                .with_for_update()
                .first()
            )
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Update product lookup failed: {e}", exc_info=True)
            raise StoreError("Update product failed")

        if product is None:
            self.db.rollback()
            raise NotFoundError("Product not found")

        product.update_from_dict(changes)
        self._commit("Update product")
        self.db.refresh(product)

        logger.info(f"Updated product {product.id} fields {sorted(changes)}")
        return product

    def delete(self, product_id: int) -> None:
        """
        Delete one of the organization's products

        Raises:
            NotFoundError: If no product with this id exists in the caller's organization
        """
        try:
            deleted = (
                self._scoped()
                .filter(Product.id == product_id)
                .delete(synchronize_session=False)
            )
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Delete product failed: {e}", exc_info=True)
            raise StoreError("Delete product failed")

        if not deleted:
            raise NotFoundError("Product not found")

        logger.info(f"Deleted product {product_id} from organization {self.organization_id}")

    def dashboard(self) -> InventorySummary:
        """Summary computed from the current catalog snapshot"""
        return summarize_inventory(self.list(), self.default_threshold)
