"""
services/ - Collaborators around the scoring engine

Modules:
    export_service.py    - Export document building and file naming
    import_service.py    - Import validation and draft routing
    completion.py        - Completion percentage and completeness checks
    report_generator.py  - Display helpers and the markdown report
"""
