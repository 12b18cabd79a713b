import logging
import threading
from typing import Dict, List, Optional, Protocol

from core.config import STORAGE_BACKEND
from models import NewReport, NewStartup, NewUser, Report, Startup, User

logger = logging.getLogger(__name__)


class Storage(Protocol):
    storage_name: str

    def create_user(self, data: NewUser) -> User:
        pass

    def get_user(self, user_id: int) -> Optional[User]:
        pass

    def get_user_by_username(self, username: str) -> Optional[User]:
        pass

    def create_startup(self, data: NewStartup) -> Startup:
        pass

    def get_startup(self, startup_id: int) -> Optional[Startup]:
        pass

    def get_all_startups(self) -> List[Startup]:
        pass

    def create_report(self, data: NewReport) -> Report:
        pass

    def get_report(self, report_id: int) -> Optional[Report]:
        pass

    def get_report_by_startup_id(self, startup_id: int) -> Optional[Report]:
        pass


class MemStorage:
    """
    Process-local store. Ids start at 1 per entity kind and are never reused.
    Records are frozen models, so handing them out does not expose the maps.
    """

    storage_name = "memory"

    def __init__(self) -> None:
        self._users: Dict[int, User] = {}
        self._startups: Dict[int, Startup] = {}
        self._reports: Dict[int, Report] = {}
        self._next_user_id = 1
        self._next_startup_id = 1
        self._next_report_id = 1
        self._lock = threading.Lock()

    # -- users -----------------------------------------------------------
    def create_user(self, data: NewUser) -> User:
        with self._lock:
            user = User(id=self._next_user_id, **data.model_dump())
            self._users[user.id] = user
            self._next_user_id += 1
        return user

    def get_user(self, user_id: int) -> Optional[User]:
        with self._lock:
            return self._users.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        with self._lock:
            return next(
                (user for user in self._users.values() if user.username == username),
                None,
            )

    # -- startups --------------------------------------------------------
    def create_startup(self, data: NewStartup) -> Startup:
        with self._lock:
            startup = Startup(id=self._next_startup_id, **data.model_dump())
            self._startups[startup.id] = startup
            self._next_startup_id += 1
        return startup

    def get_startup(self, startup_id: int) -> Optional[Startup]:
        with self._lock:
            return self._startups.get(startup_id)

    def get_all_startups(self) -> List[Startup]:
        with self._lock:
            return list(self._startups.values())

    # -- reports ---------------------------------------------------------
    def create_report(self, data: NewReport) -> Report:
        with self._lock:
            report = Report(id=self._next_report_id, **data.model_dump())
            self._reports[report.id] = report
            self._next_report_id += 1
        return report

    def get_report(self, report_id: int) -> Optional[Report]:
        with self._lock:
            return self._reports.get(report_id)

    def get_report_by_startup_id(self, startup_id: int) -> Optional[Report]:
        # First match wins; nothing stops two reports pointing at one startup.
        with self._lock:
            return next(
                (report for report in self._reports.values() if report.startup_id == startup_id),
                None,
            )


def build_storage(backend: Optional[str] = None) -> Storage:
    backend = (backend or STORAGE_BACKEND).lower()
    if backend == "memory":
        logger.info("Using in-memory storage; data is lost on restart.")
        return MemStorage()
    raise ValueError(f"Unsupported STORAGE_BACKEND: {backend!r}")
