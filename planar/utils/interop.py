import numpy as np
import pygame
from .vectors import Vector2


def from_numpy(array):
    """从长度为2的数组或序列构造Vector2"""
    values = np.asarray(array)
    if values.shape != (2,):
        raise ValueError(f"Expected an array of shape (2,), got {values.shape}")
    # 转回Python标量，保留整数/浮点类型
    return Vector2(values[0].item(), values[1].item())


def to_pygame(vector):
    return pygame.math.Vector2(vector.x, vector.y)


def from_pygame(vector):
    return Vector2(float(vector.x), float(vector.y))
