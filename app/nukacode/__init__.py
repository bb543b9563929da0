"""nuka-code - nuke the non-essentials of a JavaScript project.

Removes dependency directories, caches and build outputs from a project
tree, honouring a gitignore-style ``.nukeignore`` exclusion list.
"""

__version__ = "0.1.0"
