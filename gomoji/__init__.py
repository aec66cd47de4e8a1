"""
Gomoji

Compose emoji-tagged commit messages from the gitmoji catalog and commit them with git.
"""

__version__ = "1.0.0"

# Fixed commit scopes - single source of truth
# Used by: message.py (composition), cli/args.py (argparse choices), cli/main.py (prompts)
SCOPES = {
    'add': 'añade uno o varios archivos.',
    'del': 'elimina uno o varios archivos.',
    'upd': 'actualiza uno o varios archivos.',
    'feat': 'cuando se añade una nueva funcionalidad.',
    'fix': 'cuando se arregla un error.',
    'chore': 'tareas rutinarias que no sean específicas de una feature o un error.',
    'test': 'si añadimos o arreglamos tests.',
    'docs': 'cuando solo se modifica documentación.',
    'build': 'cuando el cambio afecta al compilado del proyecto.',
    'ci': 'el cambio afecta a ficheros de configuración y scripts relacionados con la integración continua.',
    'style': 'cambios de legibilidad o formateo de código que no afecta a funcionalidad.',
    'refactor': 'cambio de código que no corrige errores ni añade funcionalidad, pero mejora el código.',
    'perf': 'usado para mejoras de rendimiento.',
    'revert': 'si el commit revierte un commit anterior. Debería indicarse el hash del commit que se revierte.',
}

# List of scope names for validation and argparse
SCOPE_NAMES = list(SCOPES.keys())
