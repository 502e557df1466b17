"""Schedule 1 (Form 1040): additional income and adjustments to income.

Both parts are plain line-item containers. Totals are straight sums that feed
the spine: Part I line 10 into total income, Part II line 26 into AGI.
"""

from __future__ import annotations

from dataclasses import dataclass

from taxspine.tax.usd import Usd


# =============================================================================
# Part I - Additional Income (lines 1-10)
# =============================================================================


@dataclass(frozen=True)
class AdditionalIncome:
    """Additional income sources from Schedule 1, Part I.

    Attributes map to form lines; ``total()`` produces line 10.
    """

    # Lines 1-7
    taxable_refunds: Usd = Usd.ZERO
    alimony_received: Usd = Usd.ZERO
    business_income: Usd = Usd.ZERO
    other_gains: Usd = Usd.ZERO
    rental_real_estate: Usd = Usd.ZERO
    farm_income: Usd = Usd.ZERO
    unemployment_compensation: Usd = Usd.ZERO

    # Lines 8a-8z
    nol_deduction: Usd = Usd.ZERO
    gambling_income: Usd = Usd.ZERO
    cancellation_of_debt: Usd = Usd.ZERO
    foreign_earned_income_exclusion: Usd = Usd.ZERO
    income_form_8853: Usd = Usd.ZERO
    income_form_8889: Usd = Usd.ZERO
    alaska_permanent_fund: Usd = Usd.ZERO
    jury_duty_pay: Usd = Usd.ZERO
    prizes_and_awards: Usd = Usd.ZERO
    activity_not_for_profit: Usd = Usd.ZERO
    stock_options: Usd = Usd.ZERO
    rental_personal_property: Usd = Usd.ZERO
    olympic_medals: Usd = Usd.ZERO
    section_951a_inclusion: Usd = Usd.ZERO
    section_951a_a_inclusion: Usd = Usd.ZERO
    excess_business_loss_adj: Usd = Usd.ZERO
    able_distributions: Usd = Usd.ZERO
    scholarship_grants: Usd = Usd.ZERO
    medicaid_waiver: Usd = Usd.ZERO
    nonqualified_deferred_comp: Usd = Usd.ZERO
    wages_while_incarcerated: Usd = Usd.ZERO
    digital_assets: Usd = Usd.ZERO
    other_income: Usd = Usd.ZERO

    def total_other_income(self) -> Usd:
        """Sum of lines 8a-8z (line 9)."""
        return Usd.total(
            [
                self.nol_deduction,
                self.gambling_income,
                self.cancellation_of_debt,
                self.foreign_earned_income_exclusion,
                self.income_form_8853,
                self.income_form_8889,
                self.alaska_permanent_fund,
                self.jury_duty_pay,
                self.prizes_and_awards,
                self.activity_not_for_profit,
                self.stock_options,
                self.rental_personal_property,
                self.olympic_medals,
                self.section_951a_inclusion,
                self.section_951a_a_inclusion,
                self.excess_business_loss_adj,
                self.able_distributions,
                self.scholarship_grants,
                self.medicaid_waiver,
                self.nonqualified_deferred_comp,
                self.wages_while_incarcerated,
                self.digital_assets,
                self.other_income,
            ]
        )

    def total(self) -> Usd:
        """Sum of lines 1-7 and line 9 (line 10)."""
        return Usd.total(
            [
                self.taxable_refunds,
                self.alimony_received,
                self.business_income,
                self.other_gains,
                self.rental_real_estate,
                self.farm_income,
                self.unemployment_compensation,
                self.total_other_income(),
            ]
        )


# =============================================================================
# Part II - Adjustments to Income (lines 11-26)
# =============================================================================


@dataclass(frozen=True)
class Adjustments:
    """Adjustments to income from Schedule 1, Part II.

    Attributes map to form lines; ``total()`` produces line 26, which is
    subtracted from total income to arrive at AGI.
    """

    # Lines 11-23
    educator_expenses: Usd = Usd.ZERO
    business_expenses_reservists: Usd = Usd.ZERO
    hsa_deduction: Usd = Usd.ZERO
    moving_expenses: Usd = Usd.ZERO
    se_tax_deduction: Usd = Usd.ZERO
    se_retirement_plans: Usd = Usd.ZERO
    se_health_insurance: Usd = Usd.ZERO
    early_withdrawal_penalty: Usd = Usd.ZERO
    alimony_paid: Usd = Usd.ZERO
    ira_deduction: Usd = Usd.ZERO
    student_loan_interest: Usd = Usd.ZERO
    archer_msa_deduction: Usd = Usd.ZERO

    # Lines 24a-24z
    jury_duty_pay: Usd = Usd.ZERO
    rental_personal_property: Usd = Usd.ZERO
    olympic_medals: Usd = Usd.ZERO
    reforestation: Usd = Usd.ZERO
    supplemental_unemployment: Usd = Usd.ZERO
    contributions_501c18d: Usd = Usd.ZERO
    chaplain_contributions: Usd = Usd.ZERO
    attorney_fees_discrimination: Usd = Usd.ZERO
    attorney_fees_whistleblower: Usd = Usd.ZERO
    housing_deduction_2555: Usd = Usd.ZERO
    excess_deductions_67e: Usd = Usd.ZERO
    other_adjustments: Usd = Usd.ZERO

    def total_other_adjustments(self) -> Usd:
        """Sum of lines 24a-24z (line 25)."""
        return Usd.total(
            [
                self.jury_duty_pay,
                self.rental_personal_property,
                self.olympic_medals,
                self.reforestation,
                self.supplemental_unemployment,
                self.contributions_501c18d,
                self.chaplain_contributions,
                self.attorney_fees_discrimination,
                self.attorney_fees_whistleblower,
                self.housing_deduction_2555,
                self.excess_deductions_67e,
                self.other_adjustments,
            ]
        )

    def total(self) -> Usd:
        """Sum of lines 11-23 and line 25 (line 26)."""
        return Usd.total(
            [
                self.educator_expenses,
                self.business_expenses_reservists,
                self.hsa_deduction,
                self.moving_expenses,
                self.se_tax_deduction,
                self.se_retirement_plans,
                self.se_health_insurance,
                self.early_withdrawal_penalty,
                self.alimony_paid,
                self.ira_deduction,
                self.student_loan_interest,
                self.archer_msa_deduction,
                self.total_other_adjustments(),
            ]
        )
