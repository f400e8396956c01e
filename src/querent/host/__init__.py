"""In-process model of the host build orchestrator.

querent is driven by callbacks: the host finalizes the module's DSL once,
then reports each build variant, then signals that all variants have been
reported. This package provides that contract without a real build
system, so the generator can run from the CLI and be tested in isolation.

Key classes:

* :class:`AndroidComponents` -- callback registry blueprints subscribe to.
* :class:`SourceSet` / :class:`SourceSetContainer` -- extra source roots
  registered per build type.
* :class:`Project` -- a module with its extension, output roots and
  variants; :meth:`Project.evaluate` fires the callbacks.
"""

from querent.host.components import AndroidComponents
from querent.host.project import Project
from querent.host.source_sets import SourceSet, SourceSetContainer

__all__ = ["AndroidComponents", "Project", "SourceSet", "SourceSetContainer"]
