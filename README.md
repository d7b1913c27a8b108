# irsol

Message types, a line parser and a wire serializer for the simple text
protocol spoken by the irsol camera server. The package also has logging helpers.

## The protocol

A client sends one message per line. There are three kinds of line:

| Line     | Message      | Meaning                    |
| -------- | ------------ | -------------------------- |
| `it=500` | `Assignment` | set a parameter to a value |
| `it?`    | `Inquiry`    | ask for the current value  |
| `gi`     | `Command`    | trigger an action          |

In a parsed line, an identifier starts with a letter. It may then contain
letters, digits and underscores. Assignments and inquiries may add indices
such as `arr[1][2]`. Commands are bare identifiers.

The value of an assignment is read like this:

- A number that contains `.`, `e` or `E` becomes a `float`, for example
  `3.14` or `1e-3`.
- Any other number becomes an `int` when it fits in a 32-bit signed integer.
  When it does not fit, it stays a `float`.
- Anything that is not a number becomes a string. Surrounding `'…'`, `"…"` or
  `{…}` is removed.

The server's replies are serialized as follows:

| Reply                    | Wire form                                       |
| ------------------------ | ----------------------------------------------- |
| success of an assignment | `it=500\n`                                      |
| success of an inquiry    | `it=500\n`, or `it\n` when there is no value    |
| success of a command     | `gi;\n`                                         |
| error                    | `it: Error: <description>\n`                    |
| grayscale image          | `img=<SOH>u16[rows,cols] attr=value …<STX><pixels><ETX>` |

In these forms, ints are written as digits and floats with six decimals
(`1.500000`). Strings are written in braces (`{text}`). The two bytes of every
pixel are swapped in the image frame.

## Usage

```python
from irsol.protocol.parser import parse
from irsol.protocol.out_messages import Success, Error
from irsol.protocol.serializer import serialize

msg = parse("it=500")            # Assignment(identifier='it', value=500)
reply = Success.from_assignment(msg, None)
serialize(reply).header          # 'it=500\n'

bad = Error.from_message(msg, "value out of range")
serialize(bad).header            # 'it: Error: value out of range\n'
```

### Modules

- `irsol.protocol.in_messages` defines `Assignment`, `Inquiry`, `Command`
  and `InMessageKind`. Invalid identifiers raise `ValueError`.
- `irsol.protocol.out_messages` defines two message types:
  - `Success`, built with `from_assignment`, `from_command`, `from_inquiry` or
    `as_status`.
  - `Error`, built with `Error.from_message`.
- `irsol.protocol.binary` defines `BinaryDataAttribute` and `BinaryData`. The
  16-bit buffers `BinaryDataBuffer` (1-D), `ImageBinaryData` (2-D) and
  `ColorImageBinaryData` (3-D) are built on it. The constructor takes the raw
  bytes, the shape and an optional list of attributes. It raises `ValueError`
  when the length of the data does not match the shape.
- `irsol.protocol.variants` defines `OutMessageKind`. It also has helpers to
  tell messages apart: `get_in_message_kind`, `get_out_message_kind`,
  `is_assignment`, `is_inquiry`, `is_command`, `is_success`, `is_error`,
  `is_binary_data_buffer`, `is_image_binary_data`,
  `is_color_image_binary_data` and `to_string`.
- `irsol.protocol.parser` has the line parsers:
  - `parse` returns the message, or `None` when the line matches no kind.
  - `parse_assignment`, `parse_inquiry` and `parse_command` each try a single
    kind. They return a `ParserResult`, which holds either the message or the
    reason the line did not match.
  - `parse_value` reads an assignment value.
- `irsol.protocol.serializer` does the serialization:
  - `serialize` returns a `SerializedMessage` with a text `header` and a
    binary `payload`.
  - `serialize_value` and `serialize_binary_data_attribute` render values and
    attributes.
  - `BinaryDataBuffer` and `ColorImageBinaryData` have no wire form and raise
    `RuntimeError`.
- `irsol.protocol.utils` has the string helpers: `validate_identifier`,
  `from_string` and `trim`.
- `irsol.logs` sets up logging with standard `logging`:
  - `init_logging` adds output to stdout and to a rotating log file.
  - `set_logger_name`, `set_logging_format` and `set_sink_logging_format`
    change the logger's name and layout. The layouts are in `LoggingFormat`.
  - `NamedLoggerRegistry` hands out named loggers and drops the least recently
    used one once it holds more than 256.

## What is not included

The package does not include the server itself, the network side or the
camera. It does not listen on a socket, handle client sessions, capture
images or control camera settings. It only provides the message model and the
text and binary wire format that such a server uses. The package has no
command-line program.

## Tests

```
pip install -e .[test]
pytest
```