from enum import Enum


class MaturityLevel(str, Enum):
    UNSTABLE = "unstable"    # overall < 2.0
    EMERGING = "emerging"    # 2.0 <= overall < 3.0
    DEFINED = "defined"      # 3.0 <= overall < 3.5
    OPTIMIZED = "optimized"  # overall >= 3.5


class Priority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class CompassInterpretation(str, Enum):
    BALANCED = "balanced"
    SPEED_HEAVY = "speed-heavy"
    SUSTAINABILITY_HEAVY = "sustainability-heavy"


class PulseKind(str, Enum):
    NUMERIC = "numeric"      # slider, bounded by min/max
    FREE_TEXT = "free-text"  # textarea, never averaged


class ExportStatus(str, Enum):
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
