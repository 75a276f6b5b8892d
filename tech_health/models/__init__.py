"""
models/ - Pydantic models for the Tech Health Assessment

Modules:
    enumerations.py - Maturity, priority, compass, pulse-kind, export-status enums
    framework.py    - Rubric catalogue types (Area, SubAxis, Level, PulseQuestion)
    response.py     - User answers (TeamInfo, SubAxisScore, AssessmentResponse)
    results.py      - Derived results (AreaScore, CompassPosition, Recommendation)
    export.py       - JSON interchange document (ExportDocument)
"""
