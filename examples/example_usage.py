"""Contoh: memakai resolver langsung lewat container (tanpa Flask).

Berjalan di atas store in-memory berisi data demo, jadi tidak butuh MySQL.
"""

import importlib

from src.student_affairs.student_affairs.accounts.model import Account
from src.student_affairs.student_affairs.container import build_container
from src.student_affairs.student_affairs.database.bootstrap import seed_memory_store


def main():
    settings = importlib.import_module("config.testing")
    container = build_container(settings=settings)
    seed_memory_store(container.store)

    account = Account(id="00000000-0000-0000-0000-000000000002", email="budi@smk.sch.id")
    first = container.identity_resolver.resolve(account)
    second = container.identity_resolver.resolve(account)
    print(first.status.value, first.student_id)
    print(second.status.value, second.student_id)


if __name__ == "__main__":
    main()
