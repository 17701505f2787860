# imgspider

A small command-line crawler. It fetches the index page of a site, collects
the `href` targets it finds up to each `</nav>` closing tag, visits a limited
number of those pages, gathers every `.jpg`, `.jpeg`, `.gif`, `.png` and
`.bmp` reference it sees, and downloads those images into a directory.

Both `http://` and `https://` sites are supported; HTTPS connections verify
the server certificate. It uses only the Python standard library.

## Installation

```
pip install .
```

## Usage

```
spider [-rlp] URL
```

Between one and six arguments are accepted. The URL comes last, must start
with `http://` or `https://`, and must have a `/` after the host name, for
example `https://example.com/`. URLs longer than 1024 characters are
rejected. The host may carry an explicit port (`http://localhost:8080/`);
otherwise port 80 or 443 is used.

Options (flags may be combined, as in `-rl`):

- `-r` is accepted; links are followed and images downloaded whether or not
  it is given.
- `-l N` sets how many linked pages are visited after the index page. The
  default is 5. Only one depth may be given. `-l` has no effect once `-p`
  has been seen.
- `-p PATH` sets the directory the images are saved in. The argument is taken
  only if it is an existing directory that is readable and writable; only one
  such directory may be given, and its name may be at most 1023 characters.
  The default is `./data`.

Whatever directory is chosen, including the default `./data`, must already
exist, or the program stops with "The directory mentioned do not exist".

Examples:

```
spider -r https://example.com/
spider -r -l 2 https://example.com/
spider -r -l 3 -p ./images https://example.com/
```

Before crawling, the program prints the host name, the target directory, the
depth and which options were chosen. Each image is saved under its last path
component inside the target directory; an image that fails to download is
reported on standard error and skipped. The exit status is 0 on success and 2
when the arguments are wrong, a page cannot be fetched, an HTTPS index page
answers "302 Moved Temporarily", or no images are found.

## Using it from Python

```python
from imgspider.config import parse_args
from imgspider.crawler import Spider

config = parse_args(["-r", "-l", "2", "https://example.com/"])
spider = Spider(config)
images = spider.crawl()          # image references found
saved = spider.download_images() # paths of the files written
```

`Spider.run()` does both steps and raises `LookupError` when no image was
found.

- `imgspider.config`: `parse_args(argv)` returns a `SpiderConfig` and raises
  `ArgumentError` for an invalid command line; `hostname_from_url(url)`
  extracts the host; `SpiderConfig.describe()` returns the printed summary.
- `imgspider.extract`: `find_image_names(html, known)`,
  `find_links(html, url, known)` and `strip_scheme(link)` work on page text
  only, with no network access. `find_links` raises `ValueError` when a
  `<nav` has no closing tag.
- `imgspider.http`: `fetch(host, path, use_tls, browser_headers)` returns a
  whole raw response, `download(host, path, destination, use_tls)` writes a
  response body to a file, and `build_request`, `split_header` and
  `image_file_name` are the pieces they are built from. Failures raise
  `HttpError`.
- `imgspider.tools`: `is_digit`, `atoi`, `is_dir` and `usage`.

## Limitations

- Image and link detection is plain text search, not HTML parsing: an image
  name reaches back from its extension to the nearest `"` or `,`.
- Only the site given on the command line is contacted; links and images are
  requested from that host.
- Responses are read whole over HTTP/1.1 with `Connection: close`. Redirects
  are not followed, chunked transfer encoding is not decoded, and status codes
  and content types are not checked: the body after the header is saved as is.

## Running the tests

```
pip install ".[test]"
pytest
```