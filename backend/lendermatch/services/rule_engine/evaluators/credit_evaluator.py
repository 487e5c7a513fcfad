"""Credit history evaluators: filed accounts, CCJs, homeowners, existing lending."""

from lendermatch.services.rule_engine.base import (
    CriterionOutcome,
    EvaluationContext,
    RuleEvaluator,
)


class FiledAccountsEvaluator(RuleEvaluator):
    """Filed statutory accounts."""

    name = "filed_accounts"

    def evaluate(self, context: EvaluationContext) -> CriterionOutcome:
        requires = context.criteria.requires_filed_accounts
        has_accounts = context.profile.has_filed_accounts

        if requires is None or has_accounts is None:
            return CriterionOutcome.skip()

        if requires and not has_accounts:
            return CriterionOutcome.disqualify("Lender requires filed accounts")

        if has_accounts:
            return CriterionOutcome.award(
                context.weights.filed_accounts,
                "Has filed accounts",
            )

        return CriterionOutcome.skip()


class CCJEvaluator(RuleEvaluator):
    """
    County court judgments.

    Resolves the lender's acceptance flag first. Only when the lender
    accepts CCJs and the applicant has some is the total value compared
    with the lender's cap.
    """

    name = "ccjs"

    def evaluate(self, context: EvaluationContext) -> CriterionOutcome:
        accepts = context.criteria.accepts_ccjs
        has_ccjs = context.profile.has_ccjs

        if accepts is None or has_ccjs is None:
            return CriterionOutcome.skip()

        if not has_ccjs:
            if accepts:
                return CriterionOutcome.award(context.weights.no_ccjs, "No CCJs")
            return CriterionOutcome.skip()

        if not accepts:
            return CriterionOutcome.disqualify("Lender does not accept CCJs")

        max_value = context.criteria.max_ccj_value
        ccj_value = context.profile.ccj_value
        if max_value is None or ccj_value is None:
            return CriterionOutcome.skip()

        if ccj_value > max_value:
            return CriterionOutcome.disqualify(
                f"CCJ value £{ccj_value:,.2f} exceeds lender maximum £{max_value:,.2f}"
            )

        return CriterionOutcome.award(
            context.weights.ccj_within_limit,
            "CCJ value within acceptable range",
        )


class HomeownerEvaluator(RuleEvaluator):
    """Homeowner directors."""

    name = "homeowner"

    def evaluate(self, context: EvaluationContext) -> CriterionOutcome:
        requires = context.criteria.requires_homeowner
        homeowners = context.profile.directors_homeowners

        if requires is None or homeowners is None:
            return CriterionOutcome.skip()

        if requires and not homeowners:
            return CriterionOutcome.disqualify("Lender requires a homeowner director")

        if homeowners:
            return CriterionOutcome.award(
                context.weights.homeowner,
                "Director is homeowner",
            )

        return CriterionOutcome.skip()


class ExistingLendingEvaluator(RuleEvaluator):
    """
    Existing external lending.

    A lender may require existing borrowing, and separately cap how many
    lenders the applicant already borrows from.
    """

    name = "existing_lending"

    def evaluate(self, context: EvaluationContext) -> CriterionOutcome:
        requires = context.criteria.requires_existing_lending
        has_lending = context.profile.has_existing_lending

        if has_lending is None:
            return CriterionOutcome.skip()

        if requires and not has_lending:
            return CriterionOutcome.disqualify("Lender requires existing lending")

        max_lenders = context.criteria.max_existing_lenders
        count = context.profile.existing_lenders_count
        if not has_lending or max_lenders is None or count is None:
            return CriterionOutcome.skip()

        if count > max_lenders:
            return CriterionOutcome.disqualify(
                f"{count} existing lenders exceeds lender limit of {max_lenders}"
            )

        return CriterionOutcome.award(
            context.weights.existing_lenders,
            "Existing lenders within limit",
        )
