[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "imgspider"
version = "0.1.0"
description = "Crawl a website's navigation links and download the images its pages reference"
requires-python = ">=3.10"
dependencies = []
keywords = ["spider", "crawler", "scraper", "images", "download"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Indexing/Search",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
spider = "imgspider.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["imgspider"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
