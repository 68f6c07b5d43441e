"""Tests for the application shell."""

from supermarket.app import SupermarketApp
from supermarket.config import SupermarketConfig, load_config
from supermarket.console import Console
from supermarket.printer import ReceiptPrinter


def make_app(answers, config=None):
    replies = list(answers)
    output: list[str] = []

    def fake_input(prompt):
        if not replies:
            raise EOFError
        return replies.pop(0)

    app = SupermarketApp(config or SupermarketConfig(), Console(fake_input, output.append))
    return app, output


def test_exit_immediately():
    app, output = make_app(["4"])
    app.run()
    assert output[-1] == "Goodbye!"
    assert "   SUPERMARKET LOGIN MENU" in output


def test_invalid_role_choice():
    app, output = make_app(["7", "", "4"])
    app.run()
    assert " X Invalid choice." in output


def test_end_of_input_exits():
    app, output = make_app([])
    app.run()
    assert output[-1] == "Goodbye!"


def test_state_survives_across_roles(tmp_path):
    """Stock added by the admin is sold by the cashier into the same receipt."""
    config = SupermarketConfig()
    config.export.directory = str(tmp_path)
    app, output = make_app(
        [
            "1",                                  # admin
            "1", "1", "Milk", "50", "2.5", "",    # insert
            "8",                                  # back
            "3",                                  # cashier
            "1", "1", "40", "",                   # sell 40
            "1", "1", "10", "",                   # sell 10
            "3", "",                              # export receipt
            "4",                                  # back
            "4",                                  # exit
        ],
        config,
    )
    app.run()

    assert app.session.inventory.get_product(1).quantity == 0
    assert app.session.receipt.total == 125.0
    assert "  Product 'Milk' is SHORT and needs refilling!" in output
    assert " X Product 'Milk' is now EMPTY!" in output
    [exported] = list(tmp_path.glob("receipt_*.txt"))
    assert "Total: 125" in exported.read_text(encoding="utf-8")


def test_config_limits_are_applied():
    config = SupermarketConfig()
    config.inventory.max_quantity = 10
    config.inventory.low_stock_threshold = 5
    app, _ = make_app([], config)
    assert app.session.inventory.max_quantity == 10
    assert app.session.inventory.low_stock_threshold == 5
    assert app.session.printer is None


def test_printer_enabled_from_config():
    config = SupermarketConfig()
    config.printer.enabled = True
    config.printer.printer_name = "Brother_HL"
    app, _ = make_app([], config)
    assert isinstance(app.session.printer, ReceiptPrinter)
    assert app.session.printer.target == "Brother_HL"


def test_default_config_from_loader():
    app, _ = make_app(["4"], load_config())
    assert str(app.session.export_dir) == "."
