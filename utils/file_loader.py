""" Loading of the JSON files backing translations, intro steps and packages """
import json
import traceback

from utils.exceptions import FileLoadException


def load_json_file(path: str, description: str):
    """
    Loads and decodes a JSON file.

    Args:
        path (str): The path to the JSON file.
        description (str): What the file holds, used in error messages.

    Returns:
        The decoded JSON content.

    Raises:
        FileLoadException: If the file is missing or is not valid JSON.
    """

    try:
        with open(path, "r", encoding="utf-8") as file:
            return json.load(file)

    except FileNotFoundError as error:
        exception_info = {
            "message": f"File containing {description} not found: {str(error)}",
            "detail": traceback.format_exc(),
        }
        raise FileLoadException(exception_info)

    except json.JSONDecodeError as e:
        exception_info = {
            "message": f"Error decoding JSON for {description}: {str(e)}",
            "detail": traceback.format_exc(),
        }
        raise FileLoadException(exception_info)

    except OSError as e:
        exception_info = {
            "message": f"Failed to load {description}: {str(e)}",
            "detail": traceback.format_exc(),
        }
        raise FileLoadException(exception_info)
