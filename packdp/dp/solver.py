import datetime
import logging
import munch

from pyomo.common.timing import tic, toc
import packdp.logs
import packdp.solnpool
from .engine import FILL_METHODS, solve_instance

logger = packdp.logs.logger


class DynamicProgrammingSolver(object):

    def __init__(self):
        self.fill = "lazy"

    def set_options(self, *, fill=None, loglevel=None):
        #
        # Misc configuration
        #
        if fill is not None:
            if fill not in FILL_METHODS:
                raise ValueError(f"Unknown fill method: {fill}")
            self.fill = fill

        if loglevel is not None:
            packdp.logs.set_loglevel(loglevel)

    def solve(self, instance, **options):
        if len(options) > 0:
            self.set_options(**options)
        return solve_instance(instance, fill=self.fill)

    def solve_all_and_return_pool(self, instances, **options):
        start_time = datetime.datetime.now()
        if len(options) > 0:
            self.set_options(**options)

        logger.info("")
        logger.info("-" * 70)
        logger.info("DynamicProgrammingSolver - START")
        logger.verbose(f"  Fill: {self.fill}")
        tic(None)

        pool = packdp.solnpool.SelectionPool(name="DynamicProgrammingSolver")
        for instance in instances:
            selection = solve_instance(instance, fill=self.fill)
            pool.add(selection)
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(
                    f"Line {instance.line}: capacity={instance.capacity} "
                    f"items={len(instance.items)} selection={selection.render()} "
                    f"cost={selection.cost} weight={selection.weight}"
                )

        toc(f"Solved {len(pool)} instances", logger=logger, level=logging.VERBOSE)
        end_time = datetime.datetime.now()

        metadata = pool.metadata
        metadata.fill = self.fill
        metadata.num_instances = len(pool)
        metadata.start_time = str(start_time)
        metadata.end_time = str(end_time)
        metadata.time_elapsed = str(end_time - start_time)

        logger.info("DynamicProgrammingSolver - STOP")

        return munch.Munch(solutions=pool)

    def solve_all(self, instances, **options):
        return self.solve_all_and_return_pool(instances, **options).solutions
