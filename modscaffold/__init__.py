"""modscaffold -- scaffolds multi-loader Minecraft mod projects.

Builds an in-memory tree of Gradle scripts, manifests and Java stubs from a
set of project parameters and packs it into a zip archive.
"""

__version__ = "0.1.0"
