import numbers
import numpy as np
from ..core.constants import *


def _f(value):
    return GEOMETRY_DTYPE(value)


class Vector2:
    def __init__(self, x=0.0, y=0.0):
        self.x = x
        self.y = y

    @classmethod
    def default(cls, element_type=float):
        """零向量（加法单位元），分量类型由element_type决定"""
        return cls(element_type(), element_type())

    def __add__(self, other):
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, other):
        # 向量 * 向量 为逐分量乘积，否则视为标量缩放
        if isinstance(other, Vector2):
            return Vector2(self.x * other.x, self.y * other.y)
        if not _is_scalar(other):
            return NotImplemented
        return Vector2(self.x * other, self.y * other)

    def __rmul__(self, other):
        if not _is_scalar(other):
            return NotImplemented
        return Vector2(other * self.x, other * self.y)

    def __truediv__(self, other):
        if isinstance(other, Vector2):
            return Vector2(self.x / other.x, self.y / other.y)
        if not _is_scalar(other):
            return NotImplemented
        return Vector2(self.x / other, self.y / other)

    def __floordiv__(self, other):
        if isinstance(other, Vector2):
            return Vector2(self.x // other.x, self.y // other.y)
        if not _is_scalar(other):
            return NotImplemented
        return Vector2(self.x // other, self.y // other)

    def __neg__(self):
        return Vector2(-self.x, -self.y)

    def __eq__(self, other):
        """近似相等：转换为32位浮点后逐分量比较，误差小于EPSILON"""
        if not isinstance(other, Vector2):
            return NotImplemented
        diff_x = abs(_f(self.x) - _f(other.x))
        diff_y = abs(_f(self.y) - _f(other.y))
        return bool(diff_x < EPSILON and diff_y < EPSILON)

    # 近似相等无法与哈希保持一致
    __hash__ = None

    def __repr__(self):
        return f"Vector2(x={self.x!r}, y={self.y!r})"

    def __copy__(self):
        return self.copy()

    def copy(self):
        return Vector2(self.x, self.y)

    def magnitude(self):
        x, y = _f(self.x), _f(self.y)
        return float(np.sqrt(x * x + y * y))

    def normalized(self):
        """单位向量；模长为零时返回零向量"""
        mag = _f(self.magnitude())
        if mag == 0.0:
            return Vector2(0.0, 0.0)
        return Vector2(float(_f(self.x) / mag), float(_f(self.y) / mag))

    def dot(self, other):
        return float(_f(self.x) * _f(other.x) + _f(self.y) * _f(other.y))

    def cross(self, other):
        return float(_f(self.x) * _f(other.y) - _f(self.y) * _f(other.x))

    def angle(self, other):
        """两向量夹角（弧度）

        Args:
            other: 另一个向量

        Returns:
            angle: [0, pi] 内的夹角，任一向量模长为零时返回0.0
        """
        mag1 = _f(self.magnitude())
        mag2 = _f(other.magnitude())
        if mag1 == 0.0 or mag2 == 0.0:
            return 0.0
        cos_theta = _f(self.dot(other)) / (mag1 * mag2)
        # 浮点误差可能使cos略超出[-1, 1]
        cos_theta = np.clip(cos_theta, _f(-1.0), _f(1.0))
        return float(np.arccos(cos_theta))

    def rotate_around(self, pivot, angle):
        """绕pivot逆时针旋转angle弧度，返回新向量

        Args:
            pivot: 旋转中心
            angle: 旋转角度（弧度）
        """
        angle = _f(angle)
        cos_theta = np.cos(angle)
        sin_theta = np.sin(angle)

        # 平移到以pivot为原点
        x = _f(self.x) - _f(pivot.x)
        y = _f(self.y) - _f(pivot.y)

        rotated_x = x * cos_theta - y * sin_theta
        rotated_y = x * sin_theta + y * cos_theta

        return Vector2(float(rotated_x + _f(pivot.x)), float(rotated_y + _f(pivot.y)))

    def distance_to(self, other):
        dx = _f(self.x) - _f(other.x)
        dy = _f(self.y) - _f(other.y)
        return float(np.sqrt(dx * dx + dy * dy))

    def to_tuple(self):
        return (self.x, self.y)

    def to_numpy(self, dtype=None):
        return np.array([self.x, self.y], dtype=dtype)


def _is_scalar(value):
    return isinstance(value, numbers.Number)
