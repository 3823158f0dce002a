# storekeep

A small interactive shop keeper for the terminal. It keeps a list of
clients, a stock of products and the orders clients place, and stores
them in plain semicolon-separated files.

## Installing

    pip install .

## Running

    storekeep
    storekeep --directory path/to/shop

The data files are read from the current directory, or from the one given
with `-d` / `--directory`:

- `products.csv` is read if present; without it the stock is empty.
- `clients.csv` is read if present. If it is missing, you are asked for
  the first client's name, surname, address and gender (M/F), and the file
  is created holding that client.
- `orders.csv` is read if present; if it is missing, an empty one is
  created.

You are logged in as the first client. The menu offers:

1. Add client
2. Modify client (the logged-in one)
3. Change client
4. Add order
5. Change order
6. View products
7. View orders
8. Save
9. Exit

Saving (8) and exiting (9) write `clients.csv`, `orders.csv` and
`products.csv` back, and also a packed binary copy of the orders in
`orders.bin`. Reaching the end of input leaves the program without saving.

When changing an order, the new amount must be above zero; entering 0
leaves the product's amount as it was.

## File formats

`products.csv`, one product per line:

    id;name;count;price;vat

where `vat` is a fraction, such as `0.23` for 23%.

`clients.csv`, one client per line:

    id;name;surname;address;gender

`orders.csv`, one order per line: the client's position in the client
list (from 0), then pairs of product position (from 1) and amount, a `/`
marker, then the total, the hour, minute, second, day of month, month
(0–11), years since 1900, and the payment method number:

    0;1;2;3;1;/;24.6;14;5;9;3;4;124;2

Payment methods are numbered 1 to 10 (`storekeep.models.PaymentMethod`):
cash, card, BLIK, PayPal, gift card, gold, trade, blood, soul and printer
ink.

## Using it as a library

The pieces can be driven without the menu:

    from storekeep.models import Order, PaymentMethod
    from storekeep.products import ProductManager
    from storekeep.clients import ClientManager
    from storekeep.orders import OrderManager

    products = ProductManager(".")
    products.load()
    clients = ClientManager(".")
    clients.load()
    orders = OrderManager(".")
    orders.load(clients.clients, products.products)

    order = Order(clients.clients[0])
    order.add(products.products[0], 2)          # takes 2 from stock
    order.confirm(order.calc_total(), PaymentMethod.CARD)
    orders.add(order)
    orders.save()
    products.save()

`Order.add` takes the items out of stock; `Order.add_no_update` records
them without touching the stock. `OrderManager.orders_of(client)` lists a
client's orders with their positions in the book.

`storekeep.cli.run(directory, infile, outfile)` runs the whole menu over
any pair of text streams.

## What it does not do

Products can only be added or removed by editing `products.csv`; the menu
changes stock only through orders. Clients and orders cannot be deleted,
and there is no binary copy of the client list.