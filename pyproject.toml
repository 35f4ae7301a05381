[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "unikit"
version = "0.1.0"
description = "Library-OS style primitives: in-memory framebuffer, locks, mailboxes, network and block device interfaces"
requires-python = ">=3.10"
dependencies = []
keywords = ["unikernel", "framebuffer", "mutex", "semaphore", "mailbox", "block device", "network device"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Operating System",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["unikit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
