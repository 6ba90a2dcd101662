"""
파이프라인 단계별 시간 측정 (Chrome Tracing Format)

    Tracer.get().start("trace.json")      # 기본값은 비활성

    with MeasureTime("layout", "layout"):
        layout_document(root, 800)

    @MeasureTime.trace("parse_html")
    def parse(): ...

    Tracer.get().finish()                 # JSON 저장

chrome://tracing 또는 Perfetto 에서 열 수 있습니다.
"""
import json
import logging
import threading
import time
from dataclasses import dataclass, field
from functools import wraps
from typing import Any, Callable, Dict, List, Optional

logger = logging.getLogger(__name__)

PROCESS_NAME = "render-pipeline"


@dataclass
class TraceEvent:
    name: str
    cat: str
    ph: str  # B / E / i
    ts: float  # 마이크로초
    tid: int
    pid: int = 1
    args: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        event = {"name": self.name, "cat": self.cat, "ph": self.ph,
                 "ts": self.ts, "tid": self.tid, "pid": self.pid}
        if self.args:
            event["args"] = self.args
        if self.ph == "i":
            # 인스턴트 이벤트 범위: 스레드
            event["s"] = "t"
        return event


class Tracer:
    """프로세스 하나에 하나. start() 전의 이벤트는 버림"""

    _instance: Optional["Tracer"] = None
    _lock = threading.Lock()

    def __init__(self):
        self.events: List[TraceEvent] = []
        self.lock = threading.Lock()
        self.enabled = False
        self.output_file: Optional[str] = None
        self.origin = time.perf_counter()

    @classmethod
    def get(cls) -> "Tracer":
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = Tracer()
        return cls._instance

    def start(self, output_file: Optional[str] = "trace.json"):
        with self.lock:
            self.events = []
            self.output_file = output_file
            self.origin = time.perf_counter()
            self.enabled = True
        logger.debug("Tracing enabled")

    def record(self, name: str, category: str, phase: str,
               args: Optional[Dict] = None):
        if not self.enabled:
            return
        event = TraceEvent(name, category, phase,
                           (time.perf_counter() - self.origin) * 1_000_000,
                           threading.get_ident(), args=dict(args or {}))
        with self.lock:
            self.events.append(event)

    def begin(self, name, category="function", args=None):
        self.record(name, category, "B", args)

    def end(self, name, category="function"):
        self.record(name, category, "E")

    def instant(self, name, category="instant", args=None):
        self.record(name, category, "i", args)

    def finish(self) -> Optional[Dict[str, Any]]:
        """수집을 멈추고 trace 데이터를 반환. output_file이 있으면 저장"""
        if not self.enabled:
            return None
        with self.lock:
            self.enabled = False
            metadata = {"name": "process_name", "ph": "M", "pid": 1,
                        "args": {"name": PROCESS_NAME}}
            data = {
                "traceEvents": [metadata] + [e.to_dict() for e in self.events],
                "displayTimeUnit": "ms",
            }

        if self.output_file:
            with open(self.output_file, "w") as f:
                json.dump(data, f)
            logger.info("Trace with %d events saved to %s",
                        len(self.events), self.output_file)
        return data


class MeasureTime:
    """with 블록 하나를 B/E 이벤트 쌍으로 기록"""

    def __init__(self, name: str, category: str = "function",
                 args: Optional[Dict] = None):
        self.name = name
        self.category = category
        self.args = args
        self.tracer = Tracer.get()

    def __enter__(self):
        self.tracer.begin(self.name, self.category, self.args)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.tracer.end(self.name, self.category)
        return False

    @staticmethod
    def trace(name: str, category: str = "function") -> Callable:
        def decorator(func: Callable) -> Callable:
            @wraps(func)
            def wrapper(*args, **kwargs):
                with MeasureTime(name, category):
                    return func(*args, **kwargs)
            return wrapper
        return decorator


def trace_instant(name: str, category: str = "instant",
                  args: Optional[Dict] = None):
    Tracer.get().instant(name, category, args)
