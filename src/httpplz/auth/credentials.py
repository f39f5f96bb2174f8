"""Resolve client settings and secrets from explicit values, the environment or files.

Resolution order (highest to lowest priority):
1. Explicitly provided value
2. Environment variable (including values loaded from a .env file)
3. Default value

Values are never logged in full unless ``mask_in_logs=False`` is passed.
"""

import logging
import os
from pathlib import Path
from threading import Lock

from dotenv import load_dotenv

from httpplz.auth.exceptions import CredentialFileError, CredentialNotFoundError

logger = logging.getLogger(__name__)

MASK = "***"


class CredentialResolver:
    """Look up configuration values for ``ClientConfig.from_env``.

    Example:
        ```python
        resolver = CredentialResolver(load_dotenv=False)
        base_url = resolver.resolve(env_var_name="HTTPPLZ_BASE_URL", required=True)
        token = resolver.resolve_from_file(env_var_name="HTTPPLZ_TOKEN_FILE")
        ```
    """

    def __init__(self, dotenv_path: str | None = None, load_dotenv: bool = True):
        """Initialize the resolver.

        Args:
            dotenv_path: Path to a .env file. If None, python-dotenv searches
                parent directories for one.
            load_dotenv: Whether to load the .env file at all.
        """
        self._dotenv_loaded = False
        self._dotenv_lock = Lock()
        self._dotenv_path = dotenv_path

        if load_dotenv:
            self._ensure_dotenv_loaded()

    def _ensure_dotenv_loaded(self) -> None:
        if self._dotenv_loaded:
            return

        with self._dotenv_lock:
            if self._dotenv_loaded:
                return
            # Existing environment variables win over the file
            found = load_dotenv(dotenv_path=self._dotenv_path, override=False)
            self._dotenv_loaded = True
            logger.debug(f"Loaded .env file: {found}")

    def resolve(
        self,
        *,
        value: str | None = None,
        env_var_name: str | None = None,
        default: str | None = None,
        required: bool = False,
        mask_in_logs: bool = True,
    ) -> str | None:
        """Resolve a value from the first source that has one.

        Args:
            value: Explicit value; wins over every other source.
            env_var_name: Environment variable to check.
            default: Fallback when nothing else is set.
            required: Raise instead of returning None when nothing is found.
            mask_in_logs: Log ``***`` instead of the value.

        Raises:
            CredentialNotFoundError: If ``required`` and no source has a value
        """
        result = None
        source = None

        if value is not None:
            result = value
            source = "explicit parameter"
        elif env_var_name and env_var_name in os.environ:
            result = os.environ[env_var_name]
            source = f"environment variable '{env_var_name}'"
        elif default is not None:
            result = default
            source = "default value"

        if result is not None:
            shown = MASK if mask_in_logs else result
            logger.debug(f"Resolved value from {source}: {shown}")

        if required and result is None:
            error_msg = "Required value not found"
            if env_var_name:
                error_msg += f" (checked env var: {env_var_name})"
            raise CredentialNotFoundError(error_msg, env_var_name=env_var_name)

        return result

    def resolve_from_file(
        self,
        *,
        file_path: str | Path | None = None,
        env_var_name: str | None = None,
        required: bool = False,
    ) -> str | None:
        """Read a value from a file, stripped of surrounding whitespace.

        The path may be given directly or through ``env_var_name``; ``~`` and
        ``$VAR`` are expanded.

        Raises:
            CredentialFileError: If ``required`` and no path is known or the
                file cannot be read
        """
        path_to_use = None
        if file_path is not None:
            path_to_use = str(file_path)
        elif env_var_name:
            path_to_use = self.resolve(env_var_name=env_var_name, mask_in_logs=False)

        if path_to_use is None:
            if required:
                error_msg = "No file path provided"
                if env_var_name:
                    error_msg += f" (env var '{env_var_name}' not set)"
                raise CredentialFileError(error_msg)
            return None

        path_obj = Path(os.path.expanduser(os.path.expandvars(path_to_use)))

        try:
            content = path_obj.read_text().strip()
        except OSError as e:
            error_msg = f"Cannot read value file {path_obj}: {e}"
            if required:
                raise CredentialFileError(error_msg) from e
            logger.warning(error_msg)
            return None

        logger.debug(f"Resolved value from file: {path_obj} ({MASK})")
        return content
