# Copyright 2024 Heinrich Krupp
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Entry point for running the server package as a module.

Allows running the server with:
    python -m mem0_mcp.server [args]
"""

import argparse
from ..server_impl import main
from .._version import __version__


def run_with_args():
    """Handle command-line arguments before starting server."""
    parser = argparse.ArgumentParser(
        prog='python -m mem0_mcp.server',
        description='Mem0 MCP - Model Context Protocol server for Mem0 memories',
        add_help=True
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    # Parse known args to allow --version/--help while passing through other args
    parser.parse_known_args()

    main()


if __name__ == '__main__':
    run_with_args()
