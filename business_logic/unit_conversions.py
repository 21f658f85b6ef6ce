"""
Unit conversions between budget, CPM, impressions, TRPs and rate metrics.

Every function is total: a zero divisor yields 0 instead of an error,
NaN or infinity.
"""


def _safe_divide(numerator: float, denominator: float) -> float:
    if denominator == 0:
        return 0.0
    return numerator / denominator


# === Impression forecasting ===

def forecast_impressions(budget: float, cpm: float) -> float:
    """Impressions a budget buys at a given CPM."""
    return _safe_divide(budget, cpm) * 1000


def forecast_budget_from_impressions(impressions: float, cpm: float) -> float:
    """Budget needed to buy a number of impressions at a given CPM."""
    return (impressions / 1000) * cpm


# === TRPs ===

def calculate_trps(impressions: float, universe: float) -> float:
    """Impressions as a percentage of the audience universe."""
    return _safe_divide(impressions, universe) * 100


def impressions_from_trps(trps: float, universe: float) -> float:
    return (trps / 100) * universe


def calculate_cpp(spend: float, trps: float) -> float:
    """Cost per rating point."""
    return _safe_divide(spend, trps)


# === Performance metrics ===

def calculate_cpm(spend: float, impressions: float) -> float:
    return _safe_divide(spend, impressions) * 1000


def calculate_vcr(completed_views: float, impressions: float) -> float:
    """Video completion rate."""
    return _safe_divide(completed_views, impressions)


def calculate_cpcv(spend: float, completed_views: float) -> float:
    """Cost per completed view."""
    return _safe_divide(spend, completed_views)


def calculate_cplpv(spend: float, landing_page_views: float) -> float:
    """Cost per landing page view."""
    return _safe_divide(spend, landing_page_views)


def calculate_cvr(conversions: float, impressions: float) -> float:
    return _safe_divide(conversions, impressions)


def calculate_ctr(clicks: float, impressions: float) -> float:
    return _safe_divide(clicks, impressions)


def calculate_cpc(spend: float, clicks: float) -> float:
    return _safe_divide(spend, clicks)


def calculate_cp_thru_play(spend: float, thru_plays: float) -> float:
    return _safe_divide(spend, thru_plays)


# === Year over year ===

def calculate_yoy_change(current_year_spend: float, prior_year_spend: float) -> float:
    """Relative change against the prior year; 0 when there is no prior spend."""
    return _safe_divide(current_year_spend - prior_year_spend, prior_year_spend)
