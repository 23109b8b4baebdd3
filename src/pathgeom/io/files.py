"""Shape file reading and writing.

Shapes are stored as JSON documents:

    {
        "closed": true,
        "points": [
            {"kind": "corner", "point": {"x": 0, "y": 0}, "in_ctrl": null, "out_ctrl": null},
            {"kind": "smooth", "point": {"x": 10, "y": 0}, "theta": 90,
             "in_length": 5, "out_length": 5}
        ]
    }
"""

import json
from pathlib import Path

from pathgeom.core.shape import Shape
from pathgeom.exceptions import ShapeLoadError, ShapeSaveError


class ShapeReader:
    """Loads a shape from a JSON file.

    Example:
        reader = ShapeReader(Path("shape.json"))
        reader.load()
        shape = reader.shape
    """

    def __init__(self, shape_path: Path) -> None:
        self._shape_path = shape_path
        self._shape: Shape | None = None

    def load(self) -> Shape:
        """Read and parse the file.

        Returns:
            The loaded shape

        Raises:
            FileNotFoundError: If the shape file does not exist
            ShapeLoadError: If the file is not a valid shape document
        """
        if not self._shape_path.exists():
            raise FileNotFoundError(f"Shape file not found: {self._shape_path}")

        try:
            data = json.loads(self._shape_path.read_text(encoding="utf-8"))
            self._shape = Shape.from_dict(data)
        except (json.JSONDecodeError, AttributeError, KeyError, TypeError, ValueError) as e:
            raise ShapeLoadError(str(self._shape_path), str(e)) from e

        return self._shape

    @property
    def shape(self) -> Shape:
        """Return the loaded shape.

        Raises:
            RuntimeError: If the shape has not been loaded yet
        """
        if self._shape is None:
            raise RuntimeError("Shape not loaded. Call load() first.")
        return self._shape

    def close(self) -> None:
        self._shape = None

    def __enter__(self) -> "ShapeReader":
        self.load()
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


class ShapeWriter:
    """Saves a shape as a JSON file.

    Example:
        writer = ShapeWriter(shape, Path("out.json"))
        writer.save()
    """

    def __init__(self, shape: Shape, output_path: Path, indent: int | None = 2) -> None:
        self._shape = shape
        self._output_path = output_path
        self._indent = indent

    def save(self) -> Path:
        """Write the shape to the output path, creating parent directories.

        Returns:
            The path written

        Raises:
            ShapeSaveError: If the file cannot be written
        """
        try:
            self._output_path.parent.mkdir(parents=True, exist_ok=True)
            self._output_path.write_text(
                json.dumps(self._shape.to_dict(), indent=self._indent) + "\n",
                encoding="utf-8",
            )
        except OSError as e:
            raise ShapeSaveError(str(self._output_path), str(e)) from e

        return self._output_path
