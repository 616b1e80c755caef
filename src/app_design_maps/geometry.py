from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Rect:
    """Прямоугольник в пикселях исходного изображения чертежа."""

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_corners(cls, start: Point, end: Point) -> "Rect":
        """Ширина и высота неотрицательны при любом направлении протягивания."""
        return cls(
            x=min(start.x, end.x),
            y=min(start.y, end.y),
            width=abs(end.x - start.x),
            height=abs(end.y - start.y),
        )

    @classmethod
    def of(cls, obj) -> "Rect":
        return cls(x=obj.x, y=obj.y, width=obj.width, height=obj.height)

    def scaled_down(self, factor: float) -> "Rect":
        return Rect(
            x=self.x / factor,
            y=self.y / factor,
            width=self.width / factor,
            height=self.height / factor,
        )

    def as_dict(self) -> dict:
        return asdict(self)
