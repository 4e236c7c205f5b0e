from datetime import UTC, date, datetime


class SystemClock:
    def now(self) -> datetime:
        return datetime.now()

    def now_utc(self) -> datetime:
        return datetime.now(UTC)

    def today(self) -> date:
        return date.today()
