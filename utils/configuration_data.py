""" Configuration data handed to the web controllers """
import os
import traceback
from enum import IntFlag
from typing import Any, Dict, Iterable, List, Mapping, Optional

from pydantic import ValidationError

from config.settings import settings
from models.package_info import PackageModel
from models.range_set import RangeSetModel
from models.session_info import SessionModel
from scripts.logging_config import setup_logger
from utils.exceptions import FileLoadException
from utils.file_loader import load_json_file
from utils.range_set_builder import RangeSetBuilder
from utils.translator import Translator

logger = setup_logger(__name__)


class ErrorLevel(IntFlag):
    """PHP error reporting levels"""
    E_ERROR = 1
    E_WARNING = 2
    E_PARSE = 4
    E_NOTICE = 8
    E_CORE_ERROR = 16
    E_CORE_WARNING = 32
    E_COMPILE_ERROR = 64
    E_COMPILE_WARNING = 128
    E_USER_ERROR = 256
    E_USER_WARNING = 512
    E_USER_NOTICE = 1024
    E_STRICT = 2048
    E_RECOVERABLE_ERROR = 4096
    E_DEPRECATED = 8192
    E_USER_DEPRECATED = 16384
    E_ALL = 32767


_E_ALL = ErrorLevel.E_ALL
_ERROR_REPORTING_LABELS = {
    -1: 'ALL errors',
    _E_ALL & ~ErrorLevel.E_NOTICE & ~ErrorLevel.E_STRICT & ~ErrorLevel.E_DEPRECATED: 'E_ALL & ~E_NOTICE & ~E_STRICT & ~E_DEPRECATED',
    _E_ALL: 'E_ALL',
    _E_ALL & ~ErrorLevel.E_DEPRECATED & ~ErrorLevel.E_STRICT: 'E_ALL & ~E_DEPRECATED & ~E_STRICT',
    _E_ALL & ~ErrorLevel.E_NOTICE: 'E_ALL & ~E_NOTICE',
    _E_ALL & ~ErrorLevel.E_NOTICE & ~ErrorLevel.E_STRICT: 'E_ALL & ~E_NOTICE & ~E_STRICT',
    ErrorLevel.E_COMPILE_ERROR | ErrorLevel.E_RECOVERABLE_ERROR | ErrorLevel.E_ERROR | ErrorLevel.E_CORE_ERROR: 'E_COMPILE_ERROR|E_RECOVERABLE_ERROR|E_ERROR|E_CORE_ERROR',
}


def collect_packages(path: Optional[str] = None) -> List[PackageModel]:
    """Lists the name and version of every package in the package manifest.

    A missing manifest yields an empty list.

    Raises:
        FileLoadException: If the manifest cannot be decoded or has invalid entries.
    """
    path = path or settings.PACKAGES_MANIFEST_PATH
    if not os.path.exists(path):
        logger.debug(f"Package manifest {path} does not exist.")
        return []

    data = load_json_file(path, "installed packages")
    entries = data.get("packages", []) if isinstance(data, dict) else data

    try:
        return [PackageModel(name=entry["name"], version=entry["version"]) for entry in entries]
    except (KeyError, TypeError, ValidationError) as err:
        exception_info = {
            "message": f"Invalid package entry in {path}: {str(err)}",
            "detail": traceback.format_exc(),
        }
        raise FileLoadException(exception_info)


def error_reporting(value: int) -> str:
    """Returns a label for common error reporting combinations, or the value itself."""
    return _ERROR_REPORTING_LABELS.get(value, str(value))


def load_intro_config(path: Optional[str] = None) -> Dict[str, Any]:
    return load_json_file(path or settings.INTRO_CONFIG_PATH, "intro steps")


def _build_steps(elements: Any, translation_prefix: str, translator: Translator) -> List[dict]:
    steps: List[dict] = []
    if isinstance(elements, dict):
        for key, options in elements.items():
            if not isinstance(options, dict):
                raise FileLoadException(f"Options of intro step {translation_prefix}_{key} must be a mapping, got {options!r}")
            step = dict(options)
            step["intro"] = translator.translate(f"intro.{translation_prefix}_{key}")
            steps.append(step)
    return steps


def get_basic_steps(route: str, intro_config: Mapping[str, Any], translator: Translator) -> List[dict]:
    """
    Returns the intro tour steps of a route.

    Args:
        route (str): The route name, e.g. 'accounts.index'.
        intro_config (Mapping): Steps per route key, see load_intro_config.
        translator (Translator): Resolves the text of every step.

    Returns:
        List[dict]: The step options, each with its translated 'intro' text.
    """
    route_key = route.replace(".", "_")
    steps = _build_steps(intro_config.get(route_key), route_key, translator)
    logger.debug(f"Total basic steps for {route_key} is {len(steps)}")
    return steps


def get_specific_steps(
    route: str, specific_page: str, intro_config: Mapping[str, Any], translator: Translator
) -> List[dict]:
    """Returns the intro tour steps of a specific page of a route, e.g. an account type."""
    steps: List[dict] = []
    route_key = ""

    if specific_page:
        route_key = route.replace(".", "_")
        page_key = f"{route_key}_{specific_page}"
        steps = _build_steps(intro_config.get(page_key), page_key, translator)

    logger.debug(
        f'Total specific steps for route "{route}" and page "{specific_page}" (routeKey is "{route_key}") is {len(steps)}'
    )
    return steps


def has_forbidden_functions(
    disabled_functions: Optional[str] = None, forbidden: Optional[Iterable[str]] = None
) -> bool:
    """Checks whether a function the console commands need is disabled."""
    if disabled_functions is None:
        disabled_functions = settings.DISABLED_FUNCTIONS
    if forbidden is None:
        forbidden = settings.FORBIDDEN_FUNCTIONS

    disabled = [value.strip() for value in disabled_functions.split(",")]
    for entry in forbidden:
        if entry in disabled:
            logger.error(f'Method "{entry}" is FORBIDDEN, so the console command cannot be executed.')
            return True
    return False


def get_date_range_config(
    session: SessionModel,
    preferences: Mapping[str, Any],
    builder: Optional[RangeSetBuilder] = None,
    today=None,
    now=None,
) -> RangeSetModel:
    """Builds the range picker configuration from the session and the user's preferences."""
    view_range = preferences.get("viewRange", settings.DEFAULT_VIEW_RANGE)
    builder = builder or RangeSetBuilder()
    return builder.build(
        session.start,
        session.end,
        session.first,
        view_range,
        is_custom_range=session.is_custom_range,
        today=today,
        now=now,
    )
