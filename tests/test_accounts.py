import pytest

from atmbank.accounts import (
    AccountNotFound,
    CheckingAccount,
    InsufficientFunds,
    SavingsAccount,
)
from atmbank.store import verify_info

DATA = "10000000,1234,100.00,50.00\n10000001,5678,20.00,0.00\n"


@pytest.fixture
def data_path(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text(DATA, encoding="utf-8")
    return path


def scripted(*answers):
    replies = iter(answers)
    return lambda prompt="": next(replies)


def test_balances_are_stored_text(data_path):
    assert CheckingAccount("10000000", data_path).balances() == ("100.00", "50.00")


def test_deposit_then_withdraw_restores_balance(data_path):
    account = CheckingAccount(10000000, data_path)
    account.deposit(25.5)
    assert float(account.balances()[0]) == pytest.approx(125.5)
    assert account.withdraw(25.5) == "100.00"
    assert account.balances() == ("100.00", "50.00")


def test_withdraw_insufficient_leaves_file(data_path):
    account = CheckingAccount("10000001", data_path)
    with pytest.raises(InsufficientFunds):
        account.withdraw(20.01)
    assert data_path.read_text(encoding="utf-8") == DATA


def test_unknown_card_not_found(data_path):
    account = CheckingAccount("10000009", data_path)
    with pytest.raises(AccountNotFound):
        account.withdraw(1)
    with pytest.raises(AccountNotFound):
        account.deposit(1)
    with pytest.raises(AccountNotFound):
        account.balances()


def test_missing_file_not_found(tmp_path):
    with pytest.raises(AccountNotFound):
        SavingsAccount("10000000", tmp_path / "data.txt").deposit(1)


def test_transfer_conserves_total(data_path):
    sender = CheckingAccount("10000000", data_path)
    receiver = CheckingAccount("10000001", data_path)
    before = float(sender.balances()[0]) + float(receiver.balances()[0])
    sender.transfer("10000001", 30)
    after = float(sender.balances()[0]) + float(receiver.balances()[0])
    assert after == pytest.approx(before)
    assert float(receiver.balances()[0]) > 20
    assert receiver.balances()[1] == "0.00"


def test_transfer_to_self_is_rejected(data_path):
    with pytest.raises(AccountNotFound, match="reciver"):
        CheckingAccount("10000000", data_path).transfer("10000000", 1)


def test_transfer_errors(data_path):
    with pytest.raises(AccountNotFound, match="sender"):
        CheckingAccount("10000009", data_path).transfer("10000001", 1)
    with pytest.raises(AccountNotFound, match="reciver"):
        CheckingAccount("10000000", data_path).transfer("10000009", 1)
    with pytest.raises(InsufficientFunds):
        CheckingAccount("10000001", data_path).transfer("10000000", 1000)
    assert data_path.read_text(encoding="utf-8") == DATA


def test_savings_deposit_touches_only_savings(data_path):
    account = SavingsAccount("10000000", data_path)
    account.deposit(10)
    checking, saving = account.balances()
    assert checking == "100.00"
    assert float(saving) == pytest.approx(60.0)


def test_change_pin(data_path):
    CheckingAccount("10000000", data_path).change_pin("4321")
    assert verify_info(10000000, "4321", data_path) is True
    assert verify_info(10000000, "1234", data_path) is False
    assert verify_info(10000001, "5678", data_path) is True


def test_change_pin_not_found_messages(data_path):
    with pytest.raises(AccountNotFound) as checking_error:
        CheckingAccount("10000009", data_path).change_pin("4321")
    assert str(checking_error.value) == "/////////Account not found///////////////////"
    with pytest.raises(AccountNotFound) as savings_error:
        SavingsAccount("10000009", data_path).change_pin("4321")
    assert str(savings_error.value) == "Account not found"


def test_other_lines_kept_verbatim(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("10000001, odd line kept\n10000000,1234,1.00,2.00\n", encoding="utf-8")
    CheckingAccount("10000000", path).deposit(1)
    assert path.read_text(encoding="utf-8").splitlines()[0] == "10000001, odd line kept"


def test_view_balance_output(data_path):
    out = []
    SavingsAccount("10000000", data_path, say=out.append).view_balance()
    assert out == [
        "\nAccount Balances:",
        "Checking account balance: $100.00",
        "Savings account balance: $50.00",
    ]


def test_checking_menu_deposit_and_exit(data_path):
    out = []
    account = CheckingAccount("10000000", data_path, ask=scripted("2", "25", "0"), say=out.append)
    account.show_menu()
    assert "Successfully deposited $25.00" in out
    assert out[-1] == "/////////////Returned to main menu//////////////////"
    assert float(account.balances()[0]) == pytest.approx(125.0)


def test_checking_menu_reports_insufficient(data_path):
    out = []
    account = CheckingAccount("10000001", data_path, ask=scripted("3", "500", "0"), say=out.append)
    account.show_menu()
    assert "Insufficient amount" in out
    assert account.balances()[0] == "20.00"


def test_savings_menu_invalid_then_exit(data_path):
    out = []
    SavingsAccount("10000000", data_path, ask=scripted("9", "x", "0"), say=out.append).show_menu()
    assert out.count("Invalid choice") == 2
    assert out[-1] == "Returning to the main menu"


def test_prompt_change_pin(data_path):
    out = []
    account = SavingsAccount("10000001", data_path, ask=scripted("9999"), say=out.append)
    account.prompt_change_pin()
    assert out == ["PIN changed successfully"]
    assert verify_info(10000001, "9999", data_path) is True