"""Array puzzles: rotations, trading, water containers, permutations and more."""

from __future__ import annotations


def rotate_right(items: list[int], k: int) -> list[int]:
    """Return ``items`` rotated ``k`` places to the right."""
    if not items:
        return []
    k %= len(items)
    if k == 0:
        return list(items)
    return items[-k:] + items[:-k]


def max_profit(prices: list[int]) -> int:
    """Best total profit from any number of non-overlapping buy/sell trades."""
    return sum(max(later - earlier, 0) for earlier, later in zip(prices, prices[1:]))


def circular_array_rotation(a: list[int], k: int, queries: list[int]) -> list[int]:
    """Values at the ``queries`` indices after rotating ``a`` right ``k`` times."""
    if not a:
        raise ValueError("cannot rotate an empty array")
    rotated = rotate_right(a, k)
    return [rotated[index] for index in queries]


def max_area(height: list[int]) -> int:
    """Largest amount of water held between two of the given walls."""
    left, right = 0, len(height) - 1
    best = 0
    while left < right:
        best = max(best, min(height[left], height[right]) * (right - left))
        if height[left] < height[right]:
            left += 1
        else:
            right -= 1
    return best


def longest_consecutive(nums: list[int]) -> int:
    """Length of the longest run of consecutive integers among ``nums``."""
    values = set(nums)
    best = 0
    for value in values:
        if value - 1 in values:
            continue
        end = value
        while end + 1 in values:
            end += 1
        best = max(best, end - value + 1)
    return best


def majority_elements(nums: list[int]) -> list[int]:
    """Elements appearing more than ``len(nums) // 3`` times, found by a two-candidate vote."""
    candidate1 = candidate2 = 0
    count1 = count2 = 0
    for num in nums:
        if num == candidate1:
            count1 += 1
        elif num == candidate2:
            count2 += 1
        elif count1 == 0:
            candidate1 = num
        elif count2 == 0:
            candidate2 = num
        else:
            count1 -= 1
            count2 -= 1

    count1 = count2 = 0
    for num in nums:
        if num == candidate1:
            count1 += 1
        elif num == candidate2:
            count2 += 1

    threshold = len(nums) // 3
    result = []
    if count1 > threshold:
        result.append(candidate1)
    if count2 > threshold:
        result.append(candidate2)
    return result


def max_subarray(nums: list[int]) -> int:
    """Largest sum of a non-empty contiguous slice of ``nums``."""
    if not nums:
        raise ValueError("nums must not be empty")
    best = ending_here = nums[0]
    for num in nums[1:]:
        ending_here = max(num, ending_here + num)
        best = max(best, ending_here)
    return best


def next_permutation(nums: list[int]) -> list[int]:
    """The next permutation of ``nums`` in lexicographic order, wrapping to the first."""
    result = list(nums)
    i = len(result) - 2
    while i >= 0 and result[i] >= result[i + 1]:
        i -= 1
    if i >= 0:
        j = len(result) - 1
        while result[j] <= result[i]:
            j -= 1
        result[i], result[j] = result[j], result[i]
    result[i + 1 :] = reversed(result[i + 1 :])
    return result


def plus_one(digits: list[int]) -> list[int]:
    """Add one to the number whose decimal digits are ``digits``."""
    result = list(digits)
    for index in reversed(range(len(result))):
        if result[index] == 9:
            result[index] = 0
        else:
            result[index] += 1
            return result
    return [1, *result]


def remove_element(nums: list[int], val: int) -> list[int]:
    """``nums`` without any occurrence of ``val``, order kept."""
    return [num for num in nums if num != val]


def trap(height: list[int]) -> int:
    """Units of rain water trapped between the bars of ``height``."""
    left, right = 0, len(height) - 1
    max_left = max_right = 0
    water = 0
    while left <= right:
        if height[left] <= height[right]:
            if height[left] >= max_left:
                max_left = height[left]
            else:
                water += max_left - height[left]
            left += 1
        else:
            if height[right] >= max_right:
                max_right = height[right]
            else:
                water += max_right - height[right]
            right -= 1
    return water


def kids_with_candies(candies: list[int], extra: int) -> list[bool]:
    """For each kid, whether the extra candies give them the most of all."""
    if not candies:
        return []
    most = max(candies)
    return [count + extra >= most for count in candies]