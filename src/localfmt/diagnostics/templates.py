"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Keeps every setup failure message testable and consistently worded.
    """

    # ------------------------------------------------------------------
    # Parse errors
    # ------------------------------------------------------------------

    @staticmethod
    def empty_placeholder(span: SourceSpan | None = None) -> Diagnostic:
        """Placeholder opened but empty or never closed.

        Args:
            span: Location of the opening brace

        Returns:
            Diagnostic for EMPTY_PLACEHOLDER
        """
        msg = (
            "Empty placeholder found: a placeholder was opened but not closed "
            "properly. Ensure all placeholders are correctly formatted."
        )
        return Diagnostic(
            code=DiagnosticCode.EMPTY_PLACEHOLDER,
            message=msg,
            span=span,
            hint="Write {0}, {1}, ... or {name}; use \\{ for a literal brace",
        )

    @staticmethod
    def template_too_long(length: int, limit: int) -> Diagnostic:
        """Template exceeds the configured maximum length.

        Args:
            length: Actual template length in characters
            limit: Configured maximum

        Returns:
            Diagnostic for TEMPLATE_TOO_LONG
        """
        msg = f"Template length {length} exceeds maximum of {limit} characters"
        return Diagnostic(
            code=DiagnosticCode.TEMPLATE_TOO_LONG,
            message=msg,
            hint="Split the message or raise LocalFmtConfig.max_template_length",
            expected=str(limit),
            actual=str(length),
        )

    @staticmethod
    def named_reference_unsupported(name: str, span: SourceSpan | None = None) -> Diagnostic:
        """Named placeholder used in an allocated (runtime) message.

        Args:
            name: The identifier found between braces

        Returns:
            Diagnostic for NAMED_REFERENCE_UNSUPPORTED
        """
        msg = f"Named placeholder '{{{name}}}' is not supported in runtime messages"
        return Diagnostic(
            code=DiagnosticCode.NAMED_REFERENCE_UNSUPPORTED,
            message=msg,
            span=span,
            hint="Use numeric placeholders, or build a StaticMessage with constants",
        )

    @staticmethod
    def invalid_placeholder(content: str, span: SourceSpan | None = None) -> Diagnostic:
        """Placeholder content is neither a number nor an identifier.

        Args:
            content: Text found between the braces
            span: Location of the opening brace

        Returns:
            Diagnostic for INVALID_PLACEHOLDER
        """
        msg = f"Invalid placeholder '{{{content}}}': expected a number or an identifier"
        return Diagnostic(
            code=DiagnosticCode.INVALID_PLACEHOLDER,
            message=msg,
            span=span,
            hint="Write {0}, {name}, {u:name} or {i:name}; use \\{ for a literal brace",
            actual=content,
        )

    @staticmethod
    def index_too_long(digits: int, limit: int, span: SourceSpan | None = None) -> Diagnostic:
        """Placeholder index with more digits than any arity can need.

        Args:
            digits: Significant digits in the index
            limit: Maximum allowed digits
            span: Location of the opening brace

        Returns:
            Diagnostic for INVALID_PLACEHOLDER
        """
        msg = f"Placeholder index has {digits} digits; at most {limit} are allowed"
        return Diagnostic(
            code=DiagnosticCode.INVALID_PLACEHOLDER,
            message=msg,
            span=span,
            hint="Number placeholders from {0}",
            expected=f"<= {limit} digits",
            actual=str(digits),
        )

    # ------------------------------------------------------------------
    # Argument errors
    # ------------------------------------------------------------------

    @staticmethod
    def invalid_number(index: int, n: int) -> Diagnostic:
        """Placeholder index outside 0..N-1.

        Args:
            index: Offending placeholder index
            n: Declared arity

        Returns:
            Diagnostic for INVALID_NUMBER
        """
        msg = (
            f"Invalid argument number: {index} is out of the allowed range "
            f"(0 <= number < {n})."
        )
        return Diagnostic(
            code=DiagnosticCode.INVALID_NUMBER,
            message=msg,
            hint=f"Use placeholders {{0}} to {{{n - 1}}}" if n > 0 else "Remove the placeholder",
            expected=f"< {n}",
            actual=str(index),
        )

    @staticmethod
    def without_number(index: int, n: int) -> Diagnostic:
        """Declared argument never used by the template.

        Args:
            index: Lowest unused index
            n: Declared arity

        Returns:
            Diagnostic for WITHOUT_NUMBER
        """
        msg = (
            f"Missing argument number: {index} is not found within the allowed "
            f"range (0 <= number < {n})."
        )
        return Diagnostic(
            code=DiagnosticCode.WITHOUT_NUMBER,
            message=msg,
            hint=f"Every argument must be used; add {{{index}}} to the template",
            expected=str(index),
        )

    @staticmethod
    def unresolved_named_reference(name: str) -> Diagnostic:
        """Named reference reached the validator without being resolved.

        Args:
            name: The identifier

        Returns:
            Diagnostic for UNRESOLVED_NAMED_REFERENCE
        """
        msg = f"Named placeholder '{{{name}}}' was not resolved before validation"
        return Diagnostic(
            code=DiagnosticCode.UNRESOLVED_NAMED_REFERENCE,
            message=msg,
            hint="Resolve named references with resolve_named_references() first",
        )

    @staticmethod
    def unknown_constant(name: str) -> Diagnostic:
        """Named reference does not match any supplied constant.

        Args:
            name: The identifier

        Returns:
            Diagnostic for UNKNOWN_CONSTANT
        """
        msg = f"Unknown constant '{name}'"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_CONSTANT,
            message=msg,
            hint=f"Pass '{name}' in the constants mapping",
        )

    @staticmethod
    def constant_type_mismatch(name: str, expected: str, type_name: str) -> Diagnostic:
        """Constant value does not match the kind the reference asks for.

        Args:
            name: The identifier
            expected: Kind demanded by the reference ("str", "unsigned int", "signed int")
            type_name: Type of the supplied value

        Returns:
            Diagnostic for CONSTANT_TYPE_MISMATCH
        """
        msg = f"Constant '{name}' must be {expected}, got {type_name}"
        return Diagnostic(
            code=DiagnosticCode.CONSTANT_TYPE_MISMATCH,
            message=msg,
            expected=expected,
            actual=type_name,
        )

    @staticmethod
    def numeric_constant_unsupported() -> Diagnostic:
        """Numeric constant found in an allocated (runtime) message.

        Returns:
            Diagnostic for NUMERIC_CONSTANT_UNSUPPORTED
        """
        return Diagnostic(
            code=DiagnosticCode.NUMERIC_CONSTANT_UNSUPPORTED,
            message="Numeric constants are only supported in static messages",
            hint="Use StaticMessage, or convert the number to a Literal",
        )

    @staticmethod
    def numeric_out_of_range(value: int, *, signed: bool) -> Diagnostic:
        """Numeric constant outside the 128-bit range.

        Args:
            value: The rejected value
            signed: Whether the constant was declared signed

        Returns:
            Diagnostic for NUMERIC_OUT_OF_RANGE
        """
        kind = "signed" if signed else "unsigned"
        msg = f"Numeric constant {value} is out of range for a {kind} 128-bit value"
        return Diagnostic(
            code=DiagnosticCode.NUMERIC_OUT_OF_RANGE,
            message=msg,
            actual=str(value),
        )

    @staticmethod
    def arity_too_large(arity: int, limit: int) -> Diagnostic:
        """Declared or inferred arity above the configured maximum.

        Args:
            arity: Requested arity
            limit: Configured maximum

        Returns:
            Diagnostic for ARITY_TOO_LARGE
        """
        msg = f"Argument count {arity} exceeds maximum of {limit}"
        return Diagnostic(
            code=DiagnosticCode.ARITY_TOO_LARGE,
            message=msg,
            expected=f"<= {limit}",
            actual=str(arity),
        )

    @staticmethod
    def format_argument_count(expected: int, actual: int) -> Diagnostic:
        """format() called with the wrong number of arguments.

        Args:
            expected: Message arity
            actual: Number of arguments passed

        Returns:
            Diagnostic for FORMAT_ARGUMENT_COUNT
        """
        msg = f"Message expects {expected} argument(s), got {actual}"
        return Diagnostic(
            code=DiagnosticCode.FORMAT_ARGUMENT_COUNT,
            message=msg,
            expected=str(expected),
            actual=str(actual),
        )

    @staticmethod
    def format_argument_type(position: int, type_name: str) -> Diagnostic:
        """format() argument of an unsupported type.

        Args:
            position: Argument position
            type_name: Name of the received type

        Returns:
            Diagnostic for FORMAT_ARGUMENT_TYPE
        """
        msg = f"Argument {position} must be str or int, got {type_name}"
        return Diagnostic(
            code=DiagnosticCode.FORMAT_ARGUMENT_TYPE,
            message=msg,
            expected="str | int",
            actual=type_name,
        )

    # ------------------------------------------------------------------
    # Consistency errors
    # ------------------------------------------------------------------

    @staticmethod
    def missing_key(language: str, key_path: str) -> Diagnostic:
        """Language does not define a key declared by the schema.

        Args:
            language: Language name
            key_path: Dotted key path

        Returns:
            Diagnostic for MISSING_KEY
        """
        msg = f"Language '{language}' does not define message '{key_path}'"
        return Diagnostic(
            code=DiagnosticCode.MISSING_KEY,
            message=msg,
            hint="Every language must define every declared message",
            language=language,
            key_path=key_path,
        )

    @staticmethod
    def unexpected_key(language: str, key_path: str) -> Diagnostic:
        """Language defines a key the schema does not declare.

        Args:
            language: Language name
            key_path: Dotted key path

        Returns:
            Diagnostic for UNEXPECTED_KEY
        """
        msg = f"Language '{language}' defines undeclared message '{key_path}'"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_KEY,
            message=msg,
            hint="Remove the key or declare it in the message schema",
            language=language,
            key_path=key_path,
        )

    @staticmethod
    def unexpected_nesting(
        language: str, key_path: str, *, expected: str, actual: str
    ) -> Diagnostic:
        """Leaf found where a group is declared, or the reverse.

        Args:
            language: Language name
            key_path: Dotted key path
            expected: Declared kind ("group" or "message")
            actual: Kind found in the source

        Returns:
            Diagnostic for UNEXPECTED_NESTING
        """
        msg = (
            f"Expected a {expected} for key '{key_path}' in language "
            f"'{language}', but got a {actual}"
        )
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_NESTING,
            message=msg,
            language=language,
            key_path=key_path,
            expected=expected,
            actual=actual,
        )

    @staticmethod
    def arity_mismatch(language: str, key_path: str, expected: int, actual: int) -> Diagnostic:
        """Leaf arity differs from the declared or reference arity.

        Args:
            language: Language name
            key_path: Dotted key path
            expected: Declared or reference arity
            actual: Arity found in this language

        Returns:
            Diagnostic for ARITY_MISMATCH
        """
        msg = (
            f"Message '{key_path}' expects {expected} argument(s) but "
            f"'{language}' uses {actual}"
        )
        return Diagnostic(
            code=DiagnosticCode.ARITY_MISMATCH,
            message=msg,
            hint="Use the same placeholders {0}..{N-1} in every language",
            language=language,
            key_path=key_path,
            expected=str(expected),
            actual=str(actual),
        )

    @staticmethod
    def missing_language(language: str) -> Diagnostic:
        """A member of the language set has no source tree.

        Args:
            language: Language name

        Returns:
            Diagnostic for MISSING_LANGUAGE
        """
        msg = f"No messages defined for language '{language}'"
        return Diagnostic(
            code=DiagnosticCode.MISSING_LANGUAGE,
            message=msg,
            hint="Every language in the enumeration needs a message source",
            language=language,
        )

    @staticmethod
    def unknown_language(language: str, known: tuple[str, ...]) -> Diagnostic:
        """Source tree keyed by a name outside the language set.

        Args:
            language: The unknown name
            known: Names of the declared languages

        Returns:
            Diagnostic for UNKNOWN_LANGUAGE
        """
        msg = f"Unknown language '{language}'"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_LANGUAGE,
            message=msg,
            hint=f"Expected one of: {', '.join(known)}",
            language=language,
        )

    @staticmethod
    def nesting_depth_exceeded(max_depth: int, key_path: str | None = None) -> Diagnostic:
        """Message groups nested deeper than allowed.

        Args:
            max_depth: The configured maximum depth
            key_path: Key path where the limit was reached

        Returns:
            Diagnostic for NESTING_DEPTH_EXCEEDED
        """
        msg = f"Maximum nesting depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.NESTING_DEPTH_EXCEEDED,
            message=msg,
            hint="Flatten the message hierarchy",
            key_path=key_path,
        )

    # ------------------------------------------------------------------
    # Source errors
    # ------------------------------------------------------------------

    @staticmethod
    def file_not_found(path: str) -> Diagnostic:
        """Source file or folder does not exist.

        Args:
            path: The missing path

        Returns:
            Diagnostic for FILE_NOT_FOUND
        """
        return Diagnostic(
            code=DiagnosticCode.FILE_NOT_FOUND,
            message=f"Source not found: {path}",
            source_path=path,
        )

    @staticmethod
    def wrong_extension(path: str, expected: str, actual: str) -> Diagnostic:
        """Source file has a different extension than the reader expects.

        Args:
            path: The file path
            expected: Reader's extension
            actual: File's extension

        Returns:
            Diagnostic for WRONG_EXTENSION
        """
        msg = f"Expected a {expected} file, but got {actual or 'no extension'}: {path}"
        return Diagnostic(
            code=DiagnosticCode.WRONG_EXTENSION,
            message=msg,
            source_path=path,
            expected=expected,
            actual=actual,
        )

    @staticmethod
    def source_parse_failed(format_name: str, detail: str, path: str | None = None) -> Diagnostic:
        """Reader failed to parse the source text.

        Args:
            format_name: Reader format ("toml", "json", "yaml")
            detail: Underlying parser message
            path: File path when known

        Returns:
            Diagnostic for SOURCE_PARSE_FAILED
        """
        where = f" in {path}" if path else ""
        msg = f"Failed to parse {format_name}{where}: {detail}"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_PARSE_FAILED,
            message=msg,
            source_path=path,
        )

    @staticmethod
    def source_not_mapping(
        format_name: str, path: str | None = None, key_path: str | None = None
    ) -> Diagnostic:
        """Top level (or a language entry) is not a mapping.

        Args:
            format_name: Reader format
            path: File path when known
            key_path: Key whose value should have been a mapping

        Returns:
            Diagnostic for SOURCE_NOT_MAPPING
        """
        where = f" for '{key_path}'" if key_path else ""
        msg = f"Expected a {format_name} table{where}"
        if path:
            msg = f"{msg} in {path}"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_NOT_MAPPING,
            message=msg,
            source_path=path,
            key_path=key_path,
        )

    @staticmethod
    def invalid_encoding(path: str, detail: str) -> Diagnostic:
        """Source file is not valid UTF-8.

        Args:
            path: The file path
            detail: Decoder message

        Returns:
            Diagnostic for INVALID_ENCODING
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_ENCODING,
            message=f"Source is not valid UTF-8: {path} ({detail})",
            hint="Save message files as UTF-8",
            source_path=path,
        )

    @staticmethod
    def invalid_leaf(language: str, key_path: str, type_name: str) -> Diagnostic:
        """Source value is neither text nor a nested mapping.

        Args:
            language: Language name
            key_path: Dotted key path
            type_name: Type of the offending value

        Returns:
            Diagnostic for INVALID_LEAF
        """
        msg = (
            f"Expected a string or table for language '{language}' and key "
            f"'{key_path}', got {type_name}"
        )
        return Diagnostic(
            code=DiagnosticCode.INVALID_LEAF,
            message=msg,
            language=language,
            key_path=key_path,
            actual=type_name,
        )

    @staticmethod
    def unsupported_format(file_type: str, supported: tuple[str, ...]) -> Diagnostic:
        """No reader registered for the requested format.

        Args:
            file_type: Requested format name
            supported: Registered format names

        Returns:
            Diagnostic for UNSUPPORTED_FORMAT
        """
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_FORMAT,
            message=f"Unsupported source format '{file_type}'",
            hint=f"Expected one of: {', '.join(supported)}",
        )

    @staticmethod
    def merge_conflict(key_path: str) -> Diagnostic:
        """Overlay replaces a group with text or text with a group.

        Args:
            key_path: Dotted key path of the clash

        Returns:
            Diagnostic for MERGE_CONFLICT
        """
        msg = f"Cannot merge '{key_path}': base and overlay disagree on nesting"
        return Diagnostic(
            code=DiagnosticCode.MERGE_CONFLICT,
            message=msg,
            key_path=key_path,
        )

    @staticmethod
    def source_too_large(path: str, size: int, limit: int) -> Diagnostic:
        """Source file above MAX_SOURCE_SIZE.

        Args:
            path: The file path
            size: File size in bytes
            limit: Maximum allowed size

        Returns:
            Diagnostic for SOURCE_TOO_LARGE
        """
        return Diagnostic(
            code=DiagnosticCode.SOURCE_TOO_LARGE,
            message=f"Source {path} is {size} bytes, maximum is {limit}",
            source_path=path,
            expected=f"<= {limit}",
            actual=str(size),
        )
