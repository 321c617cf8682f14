# fbgraphkit

Building blocks for talking to a social graph HTTP API. The package provides
a result type that carries either a value or an error, permission lists, media
payloads, graph URI construction, paginated responses, and an HTTP client slot
you can swap out. It also has two small helpers, one for colours and one for
scaling numbers.

## Installation

```
pip install fbgraphkit
```

To run the test suite:

```
pip install "fbgraphkit[test]"
pytest
```

## Overview

| Module | What it provides |
| --- | --- |
| `fbgraphkit.result` | `Result` holds either a value or a `GraphError`. It has the members `succeeded`, `value` and `error`. `GraphError.from_json` parses a Graph `error` object. |
| `fbgraphkit.permissions` | `Permissions` is an immutable, ordered list. `Permissions.from_string` parses a comma-separated string, `str()` joins the list back, and `Permissions.difference` subtracts one list from another. |
| `fbgraphkit.media` | `MediaObject` holds bytes with a content type and file name. `set_value` stores a copy and returns the object. `MediaStream` pairs a file name with a binary stream. |
| `fbgraphkit.hls_color` | `Color` is an 8-bit RGBA colour. `HlsColor` converts between RGB and hue/luminosity/saturation through its `rgb` property and `HlsColor.from_rgb`. |
| `fbgraphkit.session` | `Session.active()` returns the shared session. It holds the app ids, the access token data, the API version (`set_api_version`, default 2.1) and the web-view redirect (`set_web_view_redirect_url`). The module also defines the enums `SessionDefaultAudience` and `SessionLoginBehavior`. |
| `fbgraphkit.graph_uri` | `GraphUriBuilder` normalises a relative or absolute path and adds the API version. It collects query parameters (`add_query_param`) and assembles the URI (`make_uri`). |
| `fbgraphkit.http_manager` | `HttpManager.instance()` forwards `get`, `post`, `delete` and `parameters_to_query_string` to an `HttpClient` that you set with `set_http_client`. |
| `fbgraphkit.scale_converter` | `convert(value, float, parameter, language)` multiplies a number by the number that the text `parameter` starts with. |
| `fbgraphkit.paginated_array` | `PaginatedArray` walks a paged endpoint with `first`, `next` and `previous`. `Paging` holds the links to the neighbouring pages. |

## Examples

Permissions:

```python
from fbgraphkit.permissions import Permissions

wanted = Permissions.from_string("public_profile,email,user_friends")
granted = Permissions.from_string("public_profile")
missing = Permissions.difference(wanted, granted)
print(str(missing))  # email,user_friends
```

Building a graph URI:

```python
from fbgraphkit.session import Session
from fbgraphkit.graph_uri import GraphUriBuilder

Session.active().set_api_version(2, 8)
builder = GraphUriBuilder("me//photos", "")
builder.add_query_param("limit", "10")
print(builder.make_uri())  # https://graph.facebook.com/v2.8/me/photos?limit=10
```

To page through results, supply your own HTTP client:

```python
import asyncio
from fbgraphkit.http_manager import HttpManager
from fbgraphkit.paginated_array import PaginatedArray

HttpManager.instance().set_http_client(my_client)  # any HttpClient implementation

async def main():
    pages = PaginatedArray("me/friends", None, lambda text: text)
    result = await pages.first()
    while result is not None and result.succeeded:
        print(result.value)
        if not pages.has_next:
            break
        result = await pages.next()

asyncio.run(main())
```

### Errors

A failed API call does not raise. The returned `Result` has `succeeded` set to
false, and its `error` holds a `GraphError`. This also covers the cases where
there is no response and where there is no next or previous page.

A page whose text is not JSON gives `None`.

The following raise `ValueError`:

- a JSON response that has neither `data` nor `error`;
- a non-array `data`;
- an item that the factory turns into `None`;
- reading `current` before any page was fetched.

## What the package does not do

- It contains no HTTP client. Requests go through whatever `HttpClient` you pass to `HttpManager.set_http_client`. Until you set one, calls raise `RuntimeError`.
- `Session` only stores settings. It does not log in, log out, show dialogs, fetch user information, or save tokens to disk.