"""Binding onto SQLAlchemy declarative models (no database required)."""

from __future__ import annotations

from decimal import Decimal

import pytest
from sqlalchemy import JSON, Numeric, String
from sqlalchemy.orm import DeclarativeBase, Mapped, column_property, mapped_column

from form_binding import ConversionFailedError, bind_from_map
from form_binding.binding.descriptors import describe
from form_binding.domain.types import FieldKind


class Base(DeclarativeBase):
    pass


class Customer(Base):
    __tablename__ = "customer"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(100), info={"bind": "customer_name"})
    credit_limit: Mapped[Decimal | None] = mapped_column(Numeric(12, 2))
    active: Mapped[bool] = mapped_column(default=True)
    nickname: Mapped[str | None] = mapped_column(String(50))
    settings: Mapped[dict | None] = mapped_column(JSON)


class Item(Base):
    __tablename__ = "item"

    id: Mapped[int] = mapped_column(primary_key=True)
    qty: Mapped[int] = mapped_column()
    double: Mapped[int] = column_property(qty * 2)


class TestMappedDescriptors:
    def test_columns_described(self):
        table = {d.name: d for d in describe(Customer)}
        assert set(table) == {"id", "name", "credit_limit", "active", "nickname", "settings"}
        assert table["id"].kind == FieldKind.SIGNED_INT
        assert table["name"].key == "customer_name"
        assert table["credit_limit"].kind == FieldKind.OPTIONAL
        assert table["credit_limit"].element_type is Decimal
        assert table["active"].kind == FieldKind.BOOL
        assert table["nickname"].optional
        assert table["settings"].element_kind == FieldKind.UNSUPPORTED

    def test_column_property_is_not_a_field(self):
        assert [d.name for d in describe(Item)] == ["id", "qty"]


class TestBindMapped:
    def test_bind_customer(self):
        customer = Customer()
        bind_from_map(
            {"id": "7", "customer_name": "Acme", "credit_limit": "1500.00", "active": "t"},
            customer,
        )
        assert customer.id == 7
        assert customer.name == "Acme"
        assert customer.credit_limit == Decimal("1500.00")
        assert customer.active is True
        assert customer.nickname is None
        assert customer.settings is None

    def test_bad_value_raises(self):
        customer = Customer()
        with pytest.raises(ConversionFailedError) as exc_info:
            bind_from_map({"id": "seven"}, customer)
        assert exc_info.value.field == "id"

    def test_unsupported_column_rejects_values(self):
        with pytest.raises(ConversionFailedError):
            bind_from_map({"settings": "{}"}, Customer())

    def test_model_with_column_property(self):
        item = Item()
        bind_from_map({"id": "1", "qty": "2", "double": "99"}, item)
        assert item.id == 1
        assert item.qty == 2
