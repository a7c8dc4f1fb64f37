"""Unit tests for invoice totals and the print/save collaborators"""

import pytest
from solid_demos.domain.models import Invoice, InvoicePersistence, InvoicePrinter, Product


def test_total_without_discount_is_raw_sum(invoice: Invoice):
    """Test zero discount leaves the sum untouched"""
    assert invoice.total == pytest.approx(134.97)


def test_total_applies_discount_percentage(sample_products: list[Product]):
    invoice = Invoice(products=sample_products, discount_percentage=10)
    assert invoice.total == pytest.approx(134.97 * 0.9)


def test_total_empty_invoice_is_zero():
    assert Invoice(products=[]).total == 0


def test_total_follows_discount_changes(invoice: Invoice):
    """Test total is derived, never cached"""
    invoice.discount_percentage = 50
    assert invoice.total == pytest.approx(134.97 / 2)

    invoice.discount_percentage = 0
    assert invoice.total == pytest.approx(134.97)


def test_out_of_range_discount_is_not_rejected():
    invoice = Invoice(products=[Product(price=10.0)], discount_percentage=150)
    assert invoice.total == pytest.approx(-5.0)


def test_invoice_ids_are_unique_and_stable(sample_products: list[Product]):
    first = Invoice(products=sample_products)
    second = Invoice(products=sample_products)

    assert first.id != second.id
    assert first.id == first.id
    original_id = first.id
    first.discount_percentage = 20
    assert first.id == original_id


def test_invoice_id_and_products_are_read_only(invoice: Invoice):
    """Test only the discount can change after construction"""
    original_id = invoice.id
    original_products = invoice.products

    with pytest.raises(AttributeError):
        invoice.id = "forged"
    with pytest.raises(AttributeError):
        invoice.products = [Product(price=1.0)]

    assert invoice.id == original_id
    assert invoice.products == original_products
    assert isinstance(invoice.products, tuple)

    invoice.discount_percentage = 25
    assert invoice.discount_percentage == 25


def test_invoice_id_is_not_a_constructor_argument(sample_products: list[Product]):
    with pytest.raises(TypeError):
        Invoice(products=sample_products, id="fixed")


def test_product_is_immutable():
    product = Product(price=1.0)
    with pytest.raises(AttributeError):
        product.price = 2.0


def test_print_invoice_delegates_to_printer(invoice: Invoice, capsys):
    invoice.discount_percentage = 10
    invoice.print_invoice()

    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "------------------------",
        f"Invoice ID : {invoice.id}",
        f"Total Cost ${invoice.total:.2f}",
        "Discounts: 10",
        "------------------------",
    ]


def test_printer_and_invoice_print_the_same_block(invoice: Invoice, capsys):
    invoice.print_invoice()
    via_invoice = capsys.readouterr().out
    InvoicePrinter(invoice).print_invoice()
    assert capsys.readouterr().out == via_invoice


def test_save_invoice_prints_placeholder(invoice: Invoice, capsys):
    invoice.save_invoice()
    assert capsys.readouterr().out == "Save to data base\n"

    InvoicePersistence(invoice).save_invoice()
    assert capsys.readouterr().out == "Save to data base\n"
