"""Qt-free core: parameters, density evaluation and errors."""
