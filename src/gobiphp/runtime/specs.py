"""Declarative interpreter specification.

This is DATA, not code. Candidate order is probe order.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class VersionCheck:
    """Arguments used to probe that a candidate binary runs."""
    args: Tuple[str, ...]


@dataclass(frozen=True)
class InterpreterSpec:
    """Everything needed to find, verify and invoke an interpreter."""
    display_name: str
    executable_name: str
    candidate_paths: Tuple[str, ...]
    version_check: VersionCheck
    run_args: Tuple[str, ...]  # Prepended to the source text
    install_command: str
    download_url: str


# Newest first among version-pinned Homebrew formulae
PHP_CANDIDATE_PATHS: Tuple[str, ...] = (
    "/opt/homebrew/bin/php",  # Homebrew Apple Silicon
    "/opt/homebrew/opt/php/bin/php",  # Homebrew PHP (latest)
    "/opt/homebrew/opt/php@8.4/bin/php",
    "/opt/homebrew/opt/php@8.3/bin/php",
    "/opt/homebrew/opt/php@8.2/bin/php",
    "/opt/homebrew/opt/php@8.1/bin/php",
    "/usr/local/bin/php",  # Homebrew Intel
    "/usr/local/opt/php/bin/php",
    "/usr/bin/php",  # System PHP
    "/Applications/MAMP/bin/php/php8.2.0/bin/php",
    "/Applications/XAMPP/bin/php",
)

PHP_SPEC = InterpreterSpec(
    display_name="PHP",
    executable_name="php",
    candidate_paths=PHP_CANDIDATE_PATHS,
    version_check=VersionCheck(args=("--version",)),
    run_args=("-r",),
    install_command="brew install php",
    download_url="https://www.php.net/downloads",
)
