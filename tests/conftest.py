"""Pytest configuration and fixtures.

Provides shared fixtures for JSON netlist content/files used across multiple tests.
"""

import tempfile
import textwrap
from pathlib import Path

import pytest
from typer.testing import CliRunner


@pytest.fixture
def sample_netlist_content():
    """Provides a sample JSON netlist as written by a synthesis tool.

    Contains:
    - Creator string.
    - Module "counter":
        - Ports clk, rst (inputs) and q (2-bit output).
        - Cells: a $dff with parameters and a $add driven by constants.
        - Memory "mem" (8 bits x 16 words).
        - Nets including a hidden tool-generated net.
    - Module "sub": an empty-bodied module with an "upto" port.
    """
    return textwrap.dedent("""
    {
      "creator": "Yosys 0.33 (git sha1 2584903a060)",
      "modules": {
        "counter": {
          "attributes": {
            "top": "00000000000000000000000000000001",
            "src": "counter.v:1.1-12.10"
          },
          "ports": {
            "clk": {
              "direction": "input",
              "bits": [ 2 ]
            },
            "rst": {
              "direction": "input",
              "bits": [ 3 ]
            },
            "q": {
              "direction": "output",
              "bits": [ 4, 5 ]
            }
          },
          "cells": {
            "$procdff$4": {
              "hide_name": 1,
              "type": "$dff",
              "parameters": {
                "CLK_POLARITY": "1",
                "WIDTH": "00000000000000000000000000000010"
              },
              "attributes": {
                "src": "counter.v:5.3-9.6"
              },
              "port_directions": {
                "CLK": "input",
                "D": "input",
                "Q": "output"
              },
              "connections": {
                "CLK": [ 2 ],
                "D": [ 6, 7 ],
                "Q": [ 4, 5 ]
              }
            },
            "$add$counter.v:8$2": {
              "hide_name": 1,
              "type": "$add",
              "parameters": {
                "A_SIGNED": 0,
                "A_WIDTH": 2,
                "Y_WIDTH": 2
              },
              "attributes": {
              },
              "port_directions": {
                "A": "input",
                "B": "input",
                "Y": "output"
              },
              "connections": {
                "A": [ 4, 5 ],
                "B": [ "1", "0" ],
                "Y": [ 6, 7 ]
              }
            }
          },
          "memories": {
            "mem": {
              "hide_name": 0,
              "attributes": {
                "src": "counter.v:3.13-3.16"
              },
              "width": 8,
              "start_offset": 0,
              "size": 16
            }
          },
          "netnames": {
            "clk": {
              "hide_name": 0,
              "bits": [ 2 ],
              "attributes": {
                "src": "counter.v:1.21-1.24"
              }
            },
            "q": {
              "hide_name": 0,
              "bits": [ 4, 5 ],
              "attributes": {
              }
            },
            "rst": {
              "hide_name": 0,
              "bits": [ 3 ],
              "attributes": {
              }
            },
            "$auto$next": {
              "hide_name": 1,
              "bits": [ 6, 7 ],
              "attributes": {
              }
            },
            "undriven": {
              "hide_name": 0,
              "bits": [ "x", "z" ],
              "attributes": {
              },
              "signed": 1
            }
          }
        },
        "sub": {
          "attributes": {
          },
          "ports": {
            "a": {
              "direction": "inout",
              "bits": [ 2, 3, 4 ],
              "offset": 1,
              "upto": 1
            }
          },
          "cells": {
          },
          "netnames": {
            "a": {
              "hide_name": 0,
              "bits": [ 2, 3, 4 ],
              "attributes": {
              },
              "offset": 1,
              "upto": 1
            }
          }
        }
      }
    }
    """)


@pytest.fixture
def minimal_netlist_content():
    """Provides the smallest useful document: one module with one port."""
    return (
        '{"creator":"t","modules":{"m":{"ports":{"p":'
        '{"direction":"input","bits":[0,"1","x"]}}}}}'
    )


@pytest.fixture
def sample_netlist_file(sample_netlist_content):
    """Creates a temporary .json file populated with sample content.

    Yields:
        Path to the temporary file. Auto-deletes on cleanup.
    """
    with tempfile.NamedTemporaryFile(mode="w", suffix=".json", delete=False) as f:
        f.write(sample_netlist_content)
        path = Path(f.name)
    yield path
    path.unlink()


@pytest.fixture
def runner():
    """Provides a Typer CLI runner."""
    return CliRunner()
