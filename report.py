# report.py
# python3

"""
Rendering of the results report.

A report looks like:

    Error: Invalid voting token zz91

    Results:
    Option No: 1 25%
    Option Yes: 2 50%

    3 Vote(s) / 1 Abstain(s) / 4 Total

Percentages are not rounded.  They are printed the way a browser prints a
JavaScript number, since that is what earlier results were published with:
"50" rather than "50.0", and "Infinity" when there are no eligible tokens.
"""

import numpy as np


def percentage(count, total):
    """
    Return (count / total) * 100 as a float.
    A zero total gives inf (or nan for 0/0) instead of raising.
    """

    with np.errstate(divide="ignore", invalid="ignore"):
        return float((np.float64(count) / np.float64(total)) * 100)


def js_number_string(x):
    """
    Return float x as JavaScript's Number.prototype.toString would.

    Digits are the shortest that round-trip (as for repr); only the choice
    between positional and exponential notation differs from Python:
        50.0   -> "50"          1e-05 -> "0.00001"
        1e+21  -> "1e+21"       1e-07 -> "1e-7"
    """

    x = float(x)
    if np.isnan(x):
        return "NaN"
    if np.isinf(x):
        return "Infinity" if x > 0 else "-Infinity"
    if x == 0:
        return "0"
    if x < 0:
        return "-" + js_number_string(-x)

    mantissa, exponent = np.format_float_scientific(x, unique=True, trim="-").split("e")
    digits = mantissa.replace(".", "").rstrip("0")
    k = len(digits)
    # x == 0.digits * 10**n
    n = int(exponent) + 1

    if k <= n <= 21:
        return digits + "0" * (n - k)
    if 0 < n <= 21:
        return digits[:n] + "." + digits[n:]
    if -6 < n <= 0:
        return "0." + "0" * (-n) + digits
    e = n - 1
    sign = "+" if e >= 0 else "-"
    if k == 1:
        return "{}e{}{}".format(digits, sign, abs(e))
    return "{}.{}e{}{}".format(digits[0], digits[1:], sign, abs(e))


def option_line(option, count, total):
    return "Option {}: {} {}%".format(option, count,
                                      js_number_string(percentage(count, total)))


def summary_line(result):
    return ("{} Vote(s) / {} Abstain(s) / {} Total"
            .format(result.votes_cast, result.abstentions, result.total_eligible))


def report_lines(result):
    """ Return list of report lines for the given TallyResult. """

    lines = list(result.log)
    lines.append("")
    lines.append("Results:")
    for option, count in result.results:
        lines.append(option_line(option, count, result.total_eligible))
    lines.append("")
    lines.append(summary_line(result))
    return lines


def render_report(result):
    """ Return the report for the given TallyResult as one string. """

    return "\n".join(report_lines(result))
