from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from cuiconnect.adapters.clock import SystemClock
from cuiconnect.adapters.fs.user_table import FileUserTable
from cuiconnect.components.notifications import Notifier
from cuiconnect.components.persistence import LoadOutput, UserStore
from cuiconnect.domain.directory import Directory
from cuiconnect.domain.policy import PolicyEngine
from cuiconnect.rules.models import Rules


@dataclass
class ServiceContext:
    directory: Directory
    store: UserStore
    policy: PolicyEngine
    notifier: Notifier
    clock: SystemClock
    rules: Rules
    base_dir: Path

    @classmethod
    def create(cls, rules: Rules, base_dir: Path, clock: SystemClock | None = None) -> ServiceContext:
        clock = clock or SystemClock()

        table = FileUserTable(
            base_dir / rules.storage.users_db_file,
            encoding=rules.storage.encoding,
            atomic_writes=rules.storage.atomic_writes,
        )

        return cls(
            directory=Directory(),
            store=UserStore(table, header=rules.storage.header),
            policy=PolicyEngine(rules),
            notifier=Notifier(clock),
            clock=clock,
            rules=rules,
            base_dir=base_dir,
        )

    @property
    def backup_dir(self) -> Path:
        return self.base_dir / self.rules.ops.backups.backup_dir_name

    def load_users(self) -> LoadOutput:
        return self.store.load(self.directory)
