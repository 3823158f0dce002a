"""Client register kept in a semicolon-separated file."""

from __future__ import annotations

from pathlib import Path

from storekeep.models import Client

CLIENTS_FILE = "clients.csv"


def _gender(value: str) -> str:
    if not value:
        raise ValueError("gender must not be empty")
    return value[0]


class ClientManager:
    """Holds the client list and reads/writes ``clients.csv``."""

    def __init__(self, directory: str | Path = ".") -> None:
        self.path = Path(directory) / CLIENTS_FILE
        self.clients: list[Client] = []

    def add(self, name: str, sname: str, address: str, gender: str) -> Client:
        """Register a new client; its id is the current number of clients."""
        client = Client(len(self.clients), name, sname, address, _gender(gender))
        self.clients.append(client)
        return client

    def modify(self, client: Client, name: str, sname: str, address: str, gender: str) -> None:
        """Replace all details of an existing client."""
        client.gender = _gender(gender)
        client.address = address
        client.name = name
        client.sname = sname

    def load(self) -> list[Client]:
        """Append clients from the file. Raises FileNotFoundError if it is missing."""
        text = self.path.read_text(encoding="utf-8")
        for line in text.splitlines():
            fields = line.split(";", 4)
            if fields[0] == "":
                break
            if len(fields) != 5:
                raise ValueError(f"malformed client line: {line!r}")
            cid, name, sname, address, gender = fields
            self.clients.append(Client(int(cid), name, sname, address, _gender(gender)))
        return self.clients

    def create_first(self, name: str, sname: str, address: str, gender: str) -> Client:
        """Start a fresh client file holding a single first client."""
        g = _gender(gender)
        with self.path.open("w", encoding="utf-8") as out:
            out.write(f"1;{name};{sname};{address};{g}\n")
        client = Client(0, name, sname, address, g)
        self.clients.append(client)
        return client

    def save(self) -> None:
        """Write all clients to the file, replacing its contents."""
        with self.path.open("w", encoding="utf-8") as out:
            for c in self.clients:
                out.write(f"{c.client_id};{c.name};{c.sname};{c.address};{c.gender}\n")