"""
Salary calculations.

All money is rounded half-up to whole currency units. The component split
follows the payroll structure: basic and HRA as shares of the final
salary, retirals as shares of basic, four fixed annual allowances and a
special allowance that absorbs the remainder so that CTC equals the
final salary.
"""

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from django.db import transaction

from .exceptions import DuplicateYearError, MissingPreviousSalaryError
from .models import SalaryRecord

logger = logging.getLogger(__name__)

HUNDRED = Decimal('100')

BASIC_SHARE = Decimal('0.40')
HRA_SHARE = Decimal('0.16')
PF_SHARE = Decimal('0.12')
GRATUITY_SHARE = Decimal('0.048')
NPS_SHARE = Decimal('0.05')

FIXED_ALLOWANCES = {
    'lta': 30000,
    'phone': 18000,
    'fuel': 21600,
    'food': 26400,
}

def round_whole(value) -> int:
    return int(Decimal(value).quantize(Decimal('1'), rounding=ROUND_HALF_UP))


def round2(value) -> Decimal:
    return Decimal(value).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)


def _split(annual: int) -> dict:
    return {'annual': annual, 'month': round_whole(Decimal(annual) / 12)}


def salary_components(final_salary) -> dict:
    """
    Break an annual salary into payroll components.

    Returns:
        Dict of component name to ``{"annual": int, "month": int}``
    """
    final = round_whole(final_salary)

    basic = round_whole(final * BASIC_SHARE)
    hra = round_whole(final * HRA_SHARE)
    pf = round_whole(basic * PF_SHARE)
    gratuity = round_whole(basic * GRATUITY_SHARE)
    nps = round_whole(basic * NPS_SHARE)

    fixed = sum(FIXED_ALLOWANCES.values())
    retirals = pf + gratuity + nps
    special = final - basic - hra - fixed - retirals

    gross = basic + hra + special
    total = gross + fixed
    ctc = total + retirals

    components = {
        'basic': _split(basic),
        'hra': _split(hra),
        'special_allowance': _split(special),
        'gross_salary': _split(gross),
    }
    for name, amount in FIXED_ALLOWANCES.items():
        components[name] = _split(amount)
    components.update({
        'total': _split(total),
        'pf': _split(pf),
        'gratuity': _split(gratuity),
        'nps': _split(nps),
        'total_retirals': _split(retirals),
        'ctc': _split(ctc),
    })
    return components


def calculate_salary(*, previous_salary, hike_percentage=0, revision_percentage=0, bonus_percentage=0) -> dict:
    """
    Derive a year's salary figures from last year's salary and the percentages.

    The revision applies on top of the hiked salary; the bonus applies to
    the previous salary.

    Returns:
        Dict of input percentages, derived amounts and ``components``
    """
    prev = Decimal(previous_salary)
    hike = Decimal(hike_percentage)
    revision = Decimal(revision_percentage)
    bonus = Decimal(bonus_percentage)

    after_hike = prev * (1 + hike / HUNDRED)
    final_salary = round_whole(after_hike * (1 + revision / HUNDRED))
    revision_amount = round_whole(after_hike * revision / HUNDRED)
    hike_amount = round_whole(prev * hike / HUNDRED)

    if prev > 0:
        total_percentage = round2(Decimal(hike_amount + revision_amount) / prev * HUNDRED)
    else:
        total_percentage = Decimal('0.00')

    return {
        'previous_salary': prev,
        'hike_percentage': hike,
        'hike_amount': hike_amount,
        'revision_percentage': revision,
        'revision_amount': revision_amount,
        'total_percentage': total_percentage,
        'final_salary': final_salary,
        'bonus_percentage': bonus,
        'bonus_amount': round_whole(prev * bonus / HUNDRED),
        'components': salary_components(final_salary),
    }


def previous_salary_for(year: int) -> Optional[Decimal]:
    """Final salary of the latest year before ``year``, if any."""
    earlier = SalaryRecord.objects.filter(year__lt=year).order_by('-year').first()
    return earlier.final_salary if earlier else None


def resolve_previous_salary(*, year: Optional[int], previous_salary=None) -> Decimal:
    """
    Use the given previous salary, else the latest earlier year's final salary.

    Raises:
        MissingPreviousSalaryError: If neither is available
    """
    if previous_salary is not None:
        return previous_salary
    if year is not None:
        found = previous_salary_for(year)
        if found is not None:
            return found
    raise MissingPreviousSalaryError('Previous salary is required when no earlier year exists')


def _apply(record: SalaryRecord, figures: dict) -> None:
    for field, value in figures.items():
        if field != 'hike_amount':
            setattr(record, field, value)


@transaction.atomic
def create_salary_record(*, year: int, previous_salary=None, hike_percentage=0,
                         revision_percentage=0, bonus_percentage=0,
                         notes: str = '', effective_date=None) -> SalaryRecord:
    """
    Create and store a year's salary record.

    Args:
        year: Calendar year (one record per year)
        previous_salary: Last year's salary; defaults to the latest earlier record
        hike_percentage: Hike on the previous salary
        revision_percentage: Revision on top of the hiked salary
        bonus_percentage: Bonus as a share of the previous salary

    Returns:
        Saved SalaryRecord

    Raises:
        DuplicateYearError: If the year already has a record
        MissingPreviousSalaryError: If the previous salary cannot be resolved
    """
    if SalaryRecord.objects.filter(year=year).exists():
        logger.warning(f"Rejected duplicate salary record for {year}")
        raise DuplicateYearError('Salary record for this year already exists')

    figures = calculate_salary(
        previous_salary=resolve_previous_salary(year=year, previous_salary=previous_salary),
        hike_percentage=hike_percentage,
        revision_percentage=revision_percentage,
        bonus_percentage=bonus_percentage,
    )

    record = SalaryRecord(year=year, notes=notes, effective_date=effective_date)
    _apply(record, figures)
    record.save()

    logger.info(f"Salary record for {year} created: {record.final_salary}")
    return record


@transaction.atomic
def update_salary_record(*, record: SalaryRecord, **values) -> SalaryRecord:
    """
    Update a salary record and recompute its derived figures.

    Only the given values change; the rest keep their stored inputs.

    Raises:
        DuplicateYearError: If moving to a year that already has a record
    """
    year = values.get('year', record.year)
    if year != record.year and SalaryRecord.objects.filter(year=year).exclude(id=record.id).exists():
        logger.warning(f"Rejected moving salary record {record.id} to taken year {year}")
        raise DuplicateYearError('Salary record for this year already exists')

    record.year = year
    record.notes = values.get('notes', record.notes)
    record.effective_date = values.get('effective_date', record.effective_date)

    figures = calculate_salary(
        previous_salary=values.get('previous_salary', record.previous_salary),
        hike_percentage=values.get('hike_percentage', record.hike_percentage),
        revision_percentage=values.get('revision_percentage', record.revision_percentage),
        bonus_percentage=values.get('bonus_percentage', record.bonus_percentage),
    )
    _apply(record, figures)
    record.save()

    logger.info(f"Salary record for {record.year} updated: {record.final_salary}")
    return record
