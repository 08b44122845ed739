from kelp.evaluation.evaluator import eval_generic, eval_list, eval_symbol, eval_args, eval_sequence
