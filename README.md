# atmbank

A small console ATM. An administrator manages user and admin accounts. A
customer logs in with a card number and PIN and works with a checking or a
savings account. All state lives in two plain text files.

## Install

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Running

    atmbank

By default the files `data.txt` and `Admin.txt` in the working directory are
used. Other files can be given:

    atmbank --data users.txt --admin admins.txt

The command exits with status 1 when the system locks after too many failed
logins, and with status 0 on a normal exit or when input ends.

The main menu offers:

- `1` admin login: admin ID and password, three tries, then the system locks
  and the program exits.
- `2` customer login: card number, then PIN, three tries, then the system
  locks. The customer then picks `1` checking or `2` savings.
- `0` exit.

### Admin menu

- `1` add a user account: a fresh card number and a random four-digit PIN are
  printed; both balances start at 0.00
- `2` delete a user account by card number
- `3` add an admin account: asks for the password and prints the new admin ID
- `4` delete an admin account; the last remaining admin cannot be deleted
- `5` view a user's checking and savings balances
- `0` back to the main menu

### Checking account menu

View balance, deposit, withdraw, transfer to another card number, change PIN.
Withdrawals and transfers are refused when the checking balance is too low.
A transfer moves money between the checking balances of the two cards.

### Savings account menu

View balance, deposit into savings, change PIN.

## Data files

`data.txt` holds one user per line:

    card_number,pin,checking_balance,savings_balance

Balances are written with two decimal places.

`Admin.txt` holds one admin per line:

    admin_id,password

## Using it from Python

The pieces can be used without the console loop:

- `atmbank.store`: `UserRecord` (`parse`, `to_line`), `read_lines`,
  `write_lines`, `format_amount` and `verify_info(user_id, pin, path)`.
- `atmbank.accounts`: `CheckingAccount` (`deposit`, `withdraw`, `transfer`,
  `change_pin`, `balances`) and `SavingsAccount` (`deposit`, `change_pin`,
  `balances`). Failures raise `AccountNotFound` or `InsufficientFunds`, both
  subclasses of `AccountError`.
- `atmbank.admin`: `Admin` with `add_user`, `delete_user`, `add_admin`,
  `delete_admin`, `user_balance`, `verify_passwords` and `admin_login`.
  `SystemLocked` signals too many failed attempts.
- `atmbank.login`: `attempt_admin_login` and `attempt_customer_login`, which
  return `True` on success and raise `SystemLocked` after the last failed try.
- `atmbank.cli.run(data_path, admin_path, ask, say)` drives the whole menu
  with injectable input and output functions.

Example:

    from atmbank.accounts import CheckingAccount, InsufficientFunds
    from atmbank.admin import Admin

    admin = Admin("users.txt", "admins.txt")
    password = "password"
    admin_id = admin.add_admin(password)
    user = admin.add_user()

    account = CheckingAccount(user.card, "users.txt")
    account.deposit(50)
    try:
        account.withdraw(80)
    except InsufficientFunds as exc:
        print(exc)
    print(account.balances())   # ('50.00', '0.00')

## What it does not do

PINs and admin passwords are stored as plain text. There is no transaction
history, and the savings account offers no withdrawals or transfers.