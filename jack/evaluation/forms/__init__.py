"""Registry of forms for the Jack evaluator.

Maps each Form to the handler implementing it. This is the closed set of
operations a code tree can name; the evaluator consults it for every tagged
node, and a Form missing from it is an error.
"""

from jack.types.symbol import Form
from jack.evaluation.forms.scope_forms import params_form, vars_form, assign_form, lookup_form
from jack.evaluation.forms.function_forms import fn_form, call_form, return_form
from jack.evaluation.forms.abort_form import abort_form
from jack.evaluation.forms.eval_form import eval_form
from jack.evaluation.forms.if_form import if_form
from jack.evaluation.forms.loop_forms import while_form, for_form
from jack.evaluation.forms.operator_forms import (
    le_form, lt_form, ge_form, gt_form, eq_form, neq_form,
    add_form, sub_form, mul_form, div_form, pow_form, mod_form, unm_form,
)
from jack.evaluation.forms.logic_forms import and_form, or_form, xor_form, not_form, in_form
from jack.evaluation.forms.collection_forms import (
    list_form, tuple_form, object_form, len_form, get_form, set_form, delete_form,
)
from jack.evaluation.forms.predicate_forms import is_form

FORMS = {
    # scope
    Form("params"): params_form,
    Form("vars"): vars_form,
    Form("assign"): assign_form,
    Form("lookup"): lookup_form,
    # functions and non-local exits
    Form("fn"): fn_form,
    Form("call"): call_form,
    Form("return"): return_form,
    Form("abort"): abort_form,
    Form("eval"): eval_form,
    # control flow
    Form("if"): if_form,
    Form("while"): while_form,
    Form("for"): for_form,
    # comparison
    Form("le"): le_form,
    Form("lt"): lt_form,
    Form("ge"): ge_form,
    Form("gt"): gt_form,
    Form("eq"): eq_form,
    Form("neq"): neq_form,
    # arithmetic
    Form("add"): add_form,
    Form("sub"): sub_form,
    Form("mul"): mul_form,
    Form("div"): div_form,
    Form("pow"): pow_form,
    Form("mod"): mod_form,
    Form("unm"): unm_form,
    # logic
    Form("and"): and_form,
    Form("or"): or_form,
    Form("xor"): xor_form,
    Form("not"): not_form,
    Form("in"): in_form,
    # collections
    Form("list"): list_form,
    Form("tuple"): tuple_form,
    Form("object"): object_form,
    Form("len"): len_form,
    Form("get"): get_form,
    Form("set"): set_form,
    Form("delete"): delete_form,
    # type predicates
    Form("is"): is_form,
}
