import numpy as np

# 近似相等的容差
EPSILON = 1e-4

# 几何运算统一使用的浮点类型（32位）
GEOMETRY_DTYPE = np.float32
