import re
from xml.parsers import expat

from .exceptions import ParseError, ReadError
from .logging_config import get_logger

log = get_logger(__name__)

JUNK_AFTER_DOCUMENT_ELEMENT = expat.errors.codes[expat.errors.XML_ERROR_JUNK_AFTER_DOC_ELEMENT]

# '&' not followed by a character or entity reference
BARE_AMPERSAND = re.compile(rb"&(?!#[0-9]+;|#x[0-9A-Fa-f]+;|[A-Za-z_:\x80-\xff][-A-Za-z0-9._:\x80-\xff]*;)")

# Byte order marks and first-character patterns of UTF-16 documents
UTF16_PREFIXES = (b"\xfe\xff", b"\xff\xfe", b"<\x00", b"\x00<")


def _escape_bare_ampersands(data):
    """
    Rewrites stray '&' characters as '&amp;' so text such as ``AT&T`` does not
    abort the scan. UTF-16 documents are returned unchanged, the byte pattern
    only holds for ASCII-compatible encodings.
    """
    if data.startswith(UTF16_PREFIXES):
        return data
    return BARE_AMPERSAND.sub(b"&amp;", data)


def _skip_entity(name, is_parameter_entity):
    pass


def _create_scanner(values, element_offsets):
    """Returns an expat parser that adds every start tag's attribute values to ``values``.

    Self-closing tags fire the same start event as ordinary start tags, so both
    are covered. Text, comments and end tags have no handler and are skipped.
    The byte offset of the first start tag seen is appended to ``element_offsets``.
    """
    scanner = expat.ParserCreate()
    # With a foreign DTD assumed, undefined entities such as &nbsp; are skipped instead of rejected
    scanner.UseForeignDTD(True)
    scanner.SkippedEntityHandler = _skip_entity

    def on_start_element(name, attributes):
        if not element_offsets:
            element_offsets.append(scanner.CurrentByteIndex)
        values.update(attributes.values())

    scanner.StartElementHandler = on_start_element
    return scanner


def _scan(data, values):
    """
    Scans a document and collects attribute values into ``values``.

    A document may carry several top-level elements (a fragment such as
    ``<a id="1"/><b id="2"/>``). Expat stops at the second one with a
    "junk after document element" error, so scanning resumes at that byte
    offset with a fresh parser until the whole document has been consumed.
    Each resumed scan is prefixed with the document's prolog (everything
    before the first start tag), so the XML declaration's encoding and the
    entities declared in the DOCTYPE still apply to later elements.
    """
    element_offsets = []
    prolog = b""
    offset = 0

    while True:
        scanner = _create_scanner(values, element_offsets)
        try:
            scanner.Parse(prolog + data[offset:], True)
            return
        except expat.ExpatError as e:
            consumed = scanner.ErrorByteIndex - len(prolog)
            if e.code != JUNK_AFTER_DOCUMENT_ELEMENT or consumed <= 0:
                raise
            prolog = data[:element_offsets[0]]
            offset += consumed
            log.debug(f"Resuming scan at byte {offset} after a top-level element")


def extract_attributes(path):
    """
    Extracts the unique attribute values found in the start tags of an XML file.

    Values are reported the way an XML parser sees them: references are
    decoded and literal whitespace characters inside a value become spaces.

    Args:
        path (str | os.PathLike): Path to the XML document.

    Returns:
        frozenset[str]: Every distinct attribute value, names discarded.

    Raises:
        ReadError: If the file cannot be opened or read.
        ParseError: If the markup is malformed or a value cannot be decoded.
    """
    values = set()

    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError as e:
        raise ReadError(path, e.strerror or str(e)) from e

    try:
        _scan(_escape_bare_ampersands(data), values)
    except expat.ExpatError as e:
        reason = f"{expat.ErrorString(e.code)} (line {e.lineno}, column {e.offset})"
        raise ParseError(path, reason, position=(e.lineno, e.offset)) from e
    except (LookupError, UnicodeError) as e:
        # Unsupported or inconsistent declared encoding
        raise ParseError(path, str(e)) from e

    log.debug(f"Extracted {len(values)} unique attribute values from {path}")
    return frozenset(values)
