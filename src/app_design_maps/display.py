"""
Отображение сохранённых карт поверх чертежа.

Часть старых карт сохранена в другом масштабе координат. Пока эти данные не
перенесены, при показе такие прямоугольники уменьшаются на целый коэффициент.
Преобразование только для показа, в БД ничего не пишется.
"""

from app_cracks.utils.normalizers import round_half_up

from .geometry import Rect

LEGACY_RATIO_THRESHOLD = 1.5
MAX_LEGACY_FACTOR = 50


def legacy_display_rect(rect: Rect, natural_width: float, natural_height: float) -> Rect:
    """
    Прямоугольник для показа на изображении natural_width × natural_height.

    Если какое-то из значений больше соответствующего размера изображения
    более чем в 1.5 раза, все четыре делятся на min(50, round(max ratio)).
    """
    if natural_width <= 0 or natural_height <= 0:
        return rect

    ratio = max(
        rect.x / natural_width,
        rect.width / natural_width,
        rect.y / natural_height,
        rect.height / natural_height,
    )
    if ratio <= LEGACY_RATIO_THRESHOLD:
        return rect

    return rect.scaled_down(min(MAX_LEGACY_FACTOR, round_half_up(ratio)))
