from __future__ import annotations

"""
Fixed Starter Templates.

Literal hierarchies for the built-in language/framework presets. Templates
bypass the tree parser and are handed straight to the materializer.
"""

import json
from typing import Any, Callable, Dict, List

from skeldir.domain.tree_models import Directory

# -----------------------------------------------------------------------------
# BOILERPLATE SOURCES
# -----------------------------------------------------------------------------

JAVA_APP = (
    "public class App {\n"
    "    public static void main(String[] args) {\n"
    "        System.out.println(\"Hello, Java!\");\n"
    "    }\n"
    "}"
)

PYTHON_MAIN = (
    "def main():\n"
    "    print(\"Hello, Python!\")\n"
    "\n"
    "if __name__ == \"__main__\":\n"
    "    main()\n"
)

C_MAIN = (
    "#include <stdio.h>\n"
    "\n"
    "int main() {\n"
    "    printf(\"Hello, C!\\n\");\n"
    "    return 0;\n"
    "}\n"
)

CPP_MAIN = (
    "#include <iostream>\n"
    "\n"
    "int main() {\n"
    "    std::cout << \"Hello, C++!\" << std::endl;\n"
    "    return 0;\n"
    "}\n"
)

NODE_INDEX = "console.log(\"Hello, Node.js!\");\n"

REACT_APP = (
    "import React from 'react';\n"
    "\n"
    "export default function App() {\n"
    "  return <h1>Hello, React!</h1>;\n"
    "}"
)

REACT_INDEX = (
    "import React from 'react';\n"
    "import ReactDOM from 'react-dom/client';\n"
    "import App from './App';\n"
    "\n"
    "const root = ReactDOM.createRoot(document.getElementById('root'));\n"
    "root.render(<App />);"
)

REACT_HTML = (
    "<!DOCTYPE html>\n"
    "<html lang=\"en\">\n"
    "<head>\n"
    "  <meta charset=\"UTF-8\" />\n"
    "  <meta name=\"viewport\" content=\"width=device-width, initial-scale=1.0\" />\n"
    "  <title>{title}</title>\n"
    "</head>\n"
    "<body>\n"
    "  <div id=\"root\"></div>\n"
    "</body>\n"
    "</html>"
)

# -----------------------------------------------------------------------------
# TEMPLATE BUILDERS
# -----------------------------------------------------------------------------

def _readme(project_name: str) -> str:
    return f"# {project_name}\n\nCreated by skeldir CLI"


def _package_json(payload: Dict[str, Any]) -> str:
    return json.dumps(payload, indent=2)


def _flutter(project_name: str) -> Dict[str, Any]:
    return {
        "lib": {
            "core": {
                "themes.dart": None,
                "utils.dart": None,
            },
            "models": {
                "user_model.dart": None,
                "data_model.dart": None,
            },
            "providers": {
                "theme_provider.dart": None,
                "data_provider.dart": None,
                "user_provider.dart": None,
            },
            "services": {
                "api_service.dart": None,
                "storage_service.dart": None,
                "notification_service.dart": None,
            },
            "main.dart": None,
        },
    }


def _java(project_name: str) -> Dict[str, Any]:
    return {
        "src": {"main": {"java": {"App.java": JAVA_APP}}},
        "README.md": _readme(project_name),
    }


def _python(project_name: str) -> Dict[str, Any]:
    return {"main.py": PYTHON_MAIN, "README.md": _readme(project_name)}


def _c(project_name: str) -> Dict[str, Any]:
    return {"main.c": C_MAIN, "README.md": _readme(project_name)}


def _cpp(project_name: str) -> Dict[str, Any]:
    return {"main.cpp": CPP_MAIN, "README.md": _readme(project_name)}


def _node(project_name: str) -> Dict[str, Any]:
    package = {
        "name": project_name,
        "version": "1.0.0",
        "main": "index.js",
        "scripts": {"start": "node index.js"},
    }
    return {"package.json": _package_json(package), "index.js": NODE_INDEX}


def _react(project_name: str) -> Dict[str, Any]:
    package = {
        "name": project_name,
        "version": "1.0.0",
        "private": True,
        "scripts": {
            "start": "react-scripts start",
            "build": "react-scripts build",
        },
        "dependencies": {
            "react": "^18.2.0",
            "react-dom": "^18.2.0",
            "react-scripts": "5.0.1",
        },
    }
    return {
        "src": {"App.js": REACT_APP, "index.js": REACT_INDEX},
        "public": {"index.html": REACT_HTML.replace("{title}", project_name)},
        "package.json": _package_json(package),
    }


_BUILDERS: Dict[str, Callable[[str], Dict[str, Any]]] = {
    "flutter": _flutter,
    "java": _java,
    "python": _python,
    "c": _c,
    "cpp": _cpp,
    "node": _node,
    "react": _react,
}

TEMPLATE_NAMES: List[str] = list(_BUILDERS)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_template(kind: str, project_name: str) -> Directory:
    """
    Build the literal hierarchy of a built-in template.

    Args:
        kind: Template identifier, one of TEMPLATE_NAMES.
        project_name: Name interpolated into READMEs and manifests.

    Returns:
        Directory: Hierarchy ready for materialization.

    Raises:
        KeyError: If `kind` is not a known template.
    """
    try:
        builder = _BUILDERS[kind]
    except KeyError:
        raise KeyError(f"Unknown template '{kind}'. Available: {', '.join(TEMPLATE_NAMES)}") from None
    return Directory.from_mapping(builder(project_name))
