# Profiling (Chrome trace format)
from .measure_time import MeasureTime, Tracer, TraceEvent, trace_instant

__all__ = ['MeasureTime', 'Tracer', 'TraceEvent', 'trace_instant']
