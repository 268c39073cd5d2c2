import logging
from pathlib import Path

from . import ir
from .errors import ParseError, attach_source
from .lexer import decode_source
from .parser_impl import parse

logger = logging.getLogger(__name__)


def parse_file(path: Path) -> ir.SchemaModule:
    """
    Parse one schema file.

    Args:
        path: Schema file to read (UTF-8; invalid bytes are replaced)

    Returns:
        SchemaModule named after the file stem

    Raises:
        ParseError: With file, position and a source snippet attached
    """
    data = path.read_bytes()
    logger.debug("Parsing %s (%d bytes)", path, len(data))
    text = decode_source(data)

    result = parse(text)
    if isinstance(result, ParseError):
        logger.debug("Parse of %s failed at [%s]", path, result.context_path)
        raise attach_source(result, path, text)

    return ir.SchemaModule(name=path.stem, file=path, block=result)


def parse_files(files: list[Path]) -> list[ir.SchemaModule]:
    """
    Parse schema files into SchemaModule structures.

    Stops at the first file that fails to parse.

    Args:
        files: List of schema file paths to parse

    Returns:
        List of SchemaModule objects, in the order given
    """
    modules = [parse_file(f) for f in files]
    logger.info("Parsed %d schema file(s)", len(modules))
    return modules
