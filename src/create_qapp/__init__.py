"""Scaffold a new Qortal App from a template repository.

The package lists the templates published in a GitHub repository, downloads
the chosen one into a fresh directory, renames the project in its
``package.json``, installs dependencies and offers to open an editor. The
``create-qapp`` command wires these steps together.
"""

__version__ = "1.0.0"
