import asyncio
import time
from enum import Enum

from core.errors import RandoError
from utils.timestamp import format_timestamp, now_millis

class Status(Enum):
    OK = "healthy"
    DEGRADED = "degraded"
    FAIL = "unhealthy"

class CheckResult:
    __slots__ = ("name", "status", "msg")

    def __init__(self, name, status, msg=""):
        self.name = name
        self.status = status
        self.msg = msg

    def to_dict(self):
        return {"name": self.name,
                "status": self.status.value,
                "msg": self.msg}

class HealthReport:
    __slots__ = ("status", "checks", "uptime", "timestamp")

    def __init__(self, status, checks, uptime=0):
        self.status = status
        self.checks = checks
        self.uptime = uptime
        self.timestamp = format_timestamp()

    def to_dict(self):
        return {"status": self.status.value,
                "timestamp": self.timestamp,
                "uptime": round(self.uptime, 1),
                "checks": [check.to_dict() for check in self.checks]}

class HealthChecker:
    def __init__(self, ttl=1.0):
        self._checks = {}
        self._cache = None
        self._cache_time = 0
        self._ttl = ttl
        self._start_time = time.time()

    def register(self, name, check_fn, critical=True):
        self._checks[name] = (check_fn, critical)

    async def check(self):
        now = time.time()
        if self._cache and now - self._cache_time < self._ttl:
            return self._cache

        results = []
        for name, (check_fn, is_critical) in self._checks.items():
            try:
                result = await asyncio.wait_for(check_fn(), timeout=5)
            except asyncio.TimeoutError:
                result = CheckResult(name, Status.FAIL, "timeout")
            except Exception as exc:
                result = CheckResult(name, Status.FAIL, str(exc))
            results.append((result, is_critical))

        status = Status.OK
        for result, is_critical in results:
            if result.status == Status.FAIL and is_critical:
                status = Status.FAIL
            elif result.status != Status.OK and status == Status.OK:
                status = Status.DEGRADED

        self._cache = HealthReport(status, [result for result, _ in results], now - self._start_time)
        self._cache_time = now
        return self._cache

# Checks
async def check_event_loop():
    await asyncio.sleep(0)
    return CheckResult("loop", Status.OK)

def create_roundtrip_check(generator):
    """Generate an id for now and make sure it decodes back (when timestamps are on)."""
    async def check():
        try:
            identifier = generator.generate()
            if generator.settings.include_timestamp:
                epoch_ms = now_millis()
                identifier = generator.generate(date=epoch_ms)
                if generator.get_millis(identifier) != epoch_ms:
                    return CheckResult("roundtrip", Status.FAIL, "mismatch")
        except RandoError as exc:
            return CheckResult("roundtrip", Status.FAIL, exc.error_id)
        return CheckResult("roundtrip", Status.OK, f"len{len(identifier)}")
    return check

def create_entropy_check(generator, minimum_bits=64):
    async def check():
        bits = generator.settings.random_entropy
        if bits < minimum_bits:
            return CheckResult("entropy", Status.DEGRADED, f"{bits}bits")
        return CheckResult("entropy", Status.OK, f"{bits}bits")
    return check

def create_horizon_check(generator):
    """Degraded once 'now' no longer fits the nominal timestamp length."""
    async def check():
        settings = generator.settings
        if not settings.include_timestamp:
            return CheckResult("horizon", Status.OK, "no timestamp")
        if now_millis() > settings.timestamp_max_ms:
            return CheckResult("horizon", Status.DEGRADED, "overflow")
        return CheckResult("horizon", Status.OK, f"max{settings.timestamp_max_ms}")
    return check
