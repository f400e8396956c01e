"""querent -- build-time code generation for Android modules.

querent hooks into a build orchestrator's module callbacks and, for every
build variant, emits Kotlin sources and Android resources into
variant-specific output directories. Each independent generation
responsibility is a *blueprint* (build profile constants, XML resources,
language schema enumerations).

Typical workflow::

    querent init --namespace com.example.app   # write querent.yaml
    querent generate                           # emit sources for every variant

Modules:
    app: Typer application and CLI entry point.
    models: Pydantic models for configuration and the host module.
    config: Config file discovery, precedence resolution and atomic writes.
    exceptions: Exception hierarchy with exit-code mapping.
    exit_codes: Numeric exit codes.
    output: stdout/stderr formatting with Rich support.
    plugin: Applies querent to a project and runs generation.
"""

__version__ = "0.1.0"
