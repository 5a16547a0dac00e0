"""Perimeter-indexed fabric price tables (NZD, before markup).

Rows run from 9.0 m to 50.0 m in 0.5 m steps. Lookup is nearest-match
on perimeter, so values outside the table resolve to its boundary rows.
"""

from __future__ import annotations

from shadesails.domain.value_objects import EdgeType, FabricType

from .models import PriceRow

WEBBING_FABRIC_PRICES: tuple[PriceRow, ...] = (
    PriceRow(9.0, 598.23, 583.26, 549.57),
    PriceRow(9.5, 631.41, 614.73, 577.20),
    PriceRow(10.0, 665.51, 647.03, 605.44),
    PriceRow(10.5, 700.54, 680.16, 634.31),
    PriceRow(11.0, 736.49, 714.12, 663.80),
    PriceRow(11.5, 773.37, 748.93, 693.92),
    PriceRow(12.0, 811.16, 784.55, 724.65),
    PriceRow(12.5, 849.88, 821.00, 756.02),
    PriceRow(13.0, 889.53, 858.29, 788.00),
    PriceRow(13.5, 930.10, 896.42, 820.61),
    PriceRow(14.0, 971.60, 935.38, 853.86),
    PriceRow(14.5, 1014.01, 975.15, 887.71),
    PriceRow(15.0, 1057.35, 1015.77, 922.19),
    PriceRow(15.5, 1101.62, 1057.22, 957.29),
    PriceRow(16.0, 1146.81, 1099.50, 993.02),
    PriceRow(16.5, 1192.92, 1142.61, 1029.38),
    PriceRow(17.0, 1239.96, 1186.55, 1066.35),
    PriceRow(17.5, 1287.94, 1231.34, 1103.96),
    PriceRow(18.0, 1336.81, 1276.94, 1142.18),
    PriceRow(18.5, 1386.63, 1323.38, 1181.03),
    PriceRow(19.0, 1437.36, 1370.65, 1220.50),
    PriceRow(19.5, 1489.02, 1418.75, 1260.60),
    PriceRow(20.0, 1541.62, 1467.69, 1301.33),
    PriceRow(20.5, 1595.12, 1517.45, 1342.66),
    PriceRow(21.0, 1649.55, 1568.05, 1384.63),
    PriceRow(21.5, 1704.90, 1619.48, 1427.22),
    PriceRow(22.0, 1761.18, 1671.74, 1470.43),
    PriceRow(22.5, 1818.39, 1724.83, 1514.27),
    PriceRow(23.0, 1876.52, 1778.76, 1558.73),
    PriceRow(23.5, 1935.58, 1833.52, 1603.83),
    PriceRow(24.0, 1995.55, 1889.10, 1649.53),
    PriceRow(24.5, 2056.45, 1945.52, 1695.87),
    PriceRow(25.0, 2118.28, 2002.77, 1742.82),
    PriceRow(25.5, 2181.03, 2060.86, 1790.40),
    PriceRow(26.0, 2244.71, 2119.78, 1838.62),
    PriceRow(26.5, 2309.30, 2179.52, 1887.44),
    PriceRow(27.0, 2374.82, 2240.10, 1936.89),
    PriceRow(27.5, 2441.27, 2301.51, 1986.97),
    PriceRow(28.0, 2508.64, 2363.75, 2037.67),
    PriceRow(28.5, 2576.95, 2426.84, 2089.00),
    PriceRow(29.0, 2646.15, 2490.73, 2140.94),
    PriceRow(29.5, 2716.30, 2555.47, 2193.51),
    PriceRow(30.0, 2827.49, 2661.17, 2286.84),
    PriceRow(30.5, 2900.13, 2728.21, 2341.30),
    PriceRow(31.0, 2973.69, 2796.09, 2396.39),
    PriceRow(31.5, 3048.18, 2864.81, 2452.11),
    PriceRow(32.0, 3123.59, 2934.35, 2508.45),
    PriceRow(32.5, 3199.92, 3004.72, 2565.41),
    PriceRow(33.0, 3277.18, 3075.92, 2622.98),
    PriceRow(33.5, 3355.37, 3147.97, 2681.21),
    PriceRow(34.0, 3434.47, 3220.83, 2740.03),
    PriceRow(34.5, 3514.51, 3294.54, 2799.49),
    PriceRow(35.0, 3644.84, 3418.45, 2908.94),
    PriceRow(35.5, 3727.40, 3494.50, 2970.33),
    PriceRow(36.0, 3810.90, 3571.39, 3032.35),
    PriceRow(36.5, 3895.31, 3649.10, 3094.99),
    PriceRow(37.0, 3980.65, 3727.65, 3158.26),
    PriceRow(37.5, 4066.90, 3807.02, 3222.13),
    PriceRow(38.0, 4154.10, 3887.23, 3286.65),
    PriceRow(38.5, 4242.21, 3968.28, 3351.78),
    PriceRow(39.0, 4331.24, 4050.14, 3417.53),
    PriceRow(39.5, 4421.20, 4132.86, 3483.92),
    PriceRow(40.0, 4512.08, 4216.39, 3550.92),
    PriceRow(40.5, 4603.90, 4300.77, 3618.56),
    PriceRow(41.0, 4696.63, 4385.97, 3686.80),
    PriceRow(41.5, 4790.27, 4471.99, 3755.67),
    PriceRow(42.0, 4884.86, 4558.86, 3825.17),
    PriceRow(42.5, 4980.36, 4646.55, 3895.30),
    PriceRow(43.0, 5076.79, 4735.09, 3966.05),
    PriceRow(43.5, 5174.15, 4824.44, 4037.42),
    PriceRow(44.0, 5272.43, 4914.64, 4109.42),
    PriceRow(44.5, 5371.63, 5005.66, 4182.04),
    PriceRow(45.0, 5471.75, 5097.51, 4255.27),
    PriceRow(45.5, 5572.80, 5190.20, 4329.14),
    PriceRow(46.0, 5674.76, 5283.71, 4403.63),
    PriceRow(46.5, 5777.67, 5378.07, 4478.75),
    PriceRow(47.0, 5881.49, 5473.25, 4554.48),
    PriceRow(47.5, 5986.23, 5569.26, 4630.84),
    PriceRow(48.0, 6091.91, 5666.11, 4707.83),
    PriceRow(48.5, 6198.50, 5763.79, 4785.44),
    PriceRow(49.0, 6306.02, 5862.30, 4863.68),
    PriceRow(49.5, 6414.46, 5961.63, 4942.52),
    PriceRow(50.0, 6523.83, 6061.81, 5022.01),
)

CABLED_FABRIC_PRICES: tuple[PriceRow, ...] = (
    PriceRow(9.0, 606.36, 591.39, 557.70),
    PriceRow(9.5, 639.54, 622.86, 585.33),
    PriceRow(10.0, 673.64, 655.16, 613.57),
    PriceRow(10.5, 708.67, 688.29, 642.44),
    PriceRow(11.0, 744.62, 722.25, 671.93),
    PriceRow(11.5, 781.50, 757.06, 702.05),
    PriceRow(12.0, 819.29, 792.68, 732.78),
    PriceRow(12.5, 858.01, 829.13, 764.15),
    PriceRow(13.0, 897.66, 866.42, 796.13),
    PriceRow(13.5, 938.23, 904.55, 828.74),
    PriceRow(14.0, 979.73, 943.51, 861.99),
    PriceRow(14.5, 1022.14, 983.28, 895.84),
    PriceRow(15.0, 1065.48, 1023.90, 930.32),
    PriceRow(15.5, 1109.75, 1065.35, 965.42),
    PriceRow(16.0, 1154.94, 1107.63, 1001.15),
    PriceRow(16.5, 1201.05, 1150.74, 1037.51),
    PriceRow(17.0, 1248.09, 1194.68, 1074.48),
    PriceRow(17.5, 1296.07, 1239.47, 1112.09),
    PriceRow(18.0, 1344.94, 1285.07, 1150.31),
    PriceRow(18.5, 1394.76, 1331.51, 1189.16),
    PriceRow(19.0, 1445.49, 1378.78, 1228.63),
    PriceRow(19.5, 1497.15, 1426.88, 1268.73),
    PriceRow(20.0, 1549.75, 1475.82, 1309.46),
    PriceRow(20.5, 1603.25, 1525.58, 1350.79),
    PriceRow(21.0, 1657.68, 1576.18, 1392.76),
    PriceRow(21.5, 1713.03, 1627.61, 1435.35),
    PriceRow(22.0, 1769.31, 1679.87, 1478.56),
    PriceRow(22.5, 1826.52, 1732.96, 1522.40),
    PriceRow(23.0, 1884.65, 1786.89, 1566.86),
    PriceRow(23.5, 1943.71, 1841.65, 1611.96),
    PriceRow(24.0, 2003.68, 1897.23, 1657.66),
    PriceRow(24.5, 2064.58, 1953.65, 1704.00),
    PriceRow(25.0, 2126.41, 2010.90, 1750.95),
    PriceRow(25.5, 2189.16, 2068.99, 1798.53),
    PriceRow(26.0, 2252.84, 2127.91, 1846.75),
    PriceRow(26.5, 2317.43, 2187.65, 1895.57),
    PriceRow(27.0, 2382.95, 2248.23, 1945.02),
    PriceRow(27.5, 2449.40, 2309.64, 1995.10),
    PriceRow(28.0, 2516.77, 2371.88, 2045.80),
    PriceRow(28.5, 2585.08, 2434.97, 2097.13),
    PriceRow(29.0, 2654.28, 2498.86, 2149.07),
    PriceRow(29.5, 2724.43, 2563.60, 2201.64),
    PriceRow(30.0, 2838.06, 2671.74, 2297.41),
    PriceRow(30.5, 2910.70, 2738.78, 2351.87),
    PriceRow(31.0, 2984.26, 2806.66, 2406.96),
    PriceRow(31.5, 3058.75, 2875.38, 2462.68),
    PriceRow(32.0, 3134.16, 2944.92, 2519.02),
    PriceRow(32.5, 3210.49, 3015.29, 2575.98),
    PriceRow(33.0, 3287.75, 3086.49, 2633.55),
    PriceRow(33.5, 3365.94, 3158.54, 2691.78),
    PriceRow(34.0, 3445.04, 3231.40, 2750.60),
    PriceRow(34.5, 3525.08, 3305.11, 2810.06),
    PriceRow(35.0, 3606.04, 3379.65, 2870.14),
    PriceRow(35.5, 3687.91, 3455.01, 2930.84),
    PriceRow(36.0, 3770.72, 3531.21, 2992.17),
    PriceRow(36.5, 3854.45, 3608.24, 3054.13),
    PriceRow(37.0, 3939.10, 3686.10, 3116.71),
    PriceRow(37.5, 4024.67, 3764.79, 3179.90),
    PriceRow(38.0, 4111.18, 3844.31, 3243.73),
    PriceRow(38.5, 4198.61, 3924.68, 3308.18),
    PriceRow(39.0, 4286.95, 4005.85, 3373.24),
    PriceRow(39.5, 4376.22, 4087.88, 3438.94),
    PriceRow(40.0, 4498.60, 4202.91, 3537.44),
    PriceRow(40.5, 4590.11, 4286.98, 3604.77),
    PriceRow(41.0, 4682.52, 4371.86, 3672.69),
    PriceRow(41.5, 4775.85, 4457.57, 3741.25),
    PriceRow(42.0, 4870.12, 4544.12, 3810.43),
    PriceRow(42.5, 4965.30, 4631.49, 3880.24),
    PriceRow(43.0, 5061.42, 4719.72, 3950.68),
    PriceRow(43.5, 5158.46, 4808.75, 4021.73),
    PriceRow(44.0, 5256.42, 4898.63, 4093.41),
    PriceRow(44.5, 5355.30, 4989.33, 4165.71),
    PriceRow(45.0, 5455.11, 5080.87, 4238.63),
    PriceRow(45.5, 5555.85, 5173.25, 4312.19),
    PriceRow(46.0, 5657.49, 5266.44, 4386.36),
    PriceRow(46.5, 5760.08, 5360.48, 4461.16),
    PriceRow(47.0, 5863.59, 5455.35, 4536.58),
    PriceRow(47.5, 5968.01, 5551.04, 4612.62),
    PriceRow(48.0, 6073.37, 5647.57, 4689.29),
    PriceRow(48.5, 6179.64, 5744.93, 4766.58),
    PriceRow(49.0, 6286.85, 5843.13, 4844.51),
    PriceRow(49.5, 6394.98, 5942.15, 4923.04),
    PriceRow(50.0, 6504.03, 6042.01, 5002.21),
)

FABRIC_PRICE_TABLES: dict[EdgeType, tuple[PriceRow, ...]] = {
    EdgeType.WEBBING: WEBBING_FABRIC_PRICES,
    EdgeType.CABLED: CABLED_FABRIC_PRICES,
}


def nearest_row(table: tuple[PriceRow, ...], perimeter_m: float) -> PriceRow:
    """Return the row whose perimeter is closest to ``perimeter_m``.

    Ties resolve to the earlier (smaller) row.
    """
    if not table:
        raise ValueError("Price table is empty")
    return min(table, key=lambda row: abs(row.perimeter - perimeter_m))


def fabric_price(perimeter_m: float, fabric: FabricType, edge_type: EdgeType) -> float:
    """Base fabric cost in NZD for an adjusted perimeter.

    Args:
        perimeter_m: Adjusted perimeter in meters.
        fabric: Fabric column to read.
        edge_type: Selects the webbing or cabled table.

    Returns:
        Fabric cost in NZD before any markup.
    """
    return nearest_row(FABRIC_PRICE_TABLES[edge_type], perimeter_m).price_for(fabric)
